"""0001 dictionary schema

Revision ID: 0001_dictionary_schema
Revises:
Create Date: 2026-10-19 09:12:40.118204

"""
from alembic import op
import sqlalchemy as sa
from migrations.migration_helpers import table_exists, with_sqlite_cleanup


# revision identifiers, used by Alembic.
revision = '0001_dictionary_schema'
down_revision = None
branch_labels = None
depends_on = None


def _child_columns():
    return [
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('term_id', sa.Integer(), nullable=False),
    ]


def _child_constraints(table_name):
    return [
        sa.ForeignKeyConstraint(['term_id'], ['term.id'], name=f'fk_{table_name}_term_id', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    ]


def upgrade():
    with with_sqlite_cleanup():
        if not table_exists('term'):
            op.create_table(
                'term',
                sa.Column('id', sa.Integer(), nullable=False),
                sa.Column('term', sa.String(length=128), nullable=False),
                sa.Column('translation', sa.String(length=255), nullable=False),
                sa.Column('slug', sa.String(length=160), nullable=False),
                sa.Column('title_es', sa.String(length=255), nullable=True),
                sa.Column('title_en', sa.String(length=255), nullable=True),
                sa.Column('aliases', sa.JSON(), nullable=False),
                sa.Column('tags', sa.JSON(), nullable=False),
                sa.Column('category', sa.String(length=32), nullable=False),
                sa.Column('meaning', sa.Text(), nullable=False),
                sa.Column('what', sa.Text(), nullable=False),
                sa.Column('how', sa.Text(), nullable=False),
                sa.Column('meaning_es', sa.Text(), nullable=True),
                sa.Column('meaning_en', sa.Text(), nullable=True),
                sa.Column('what_es', sa.Text(), nullable=True),
                sa.Column('what_en', sa.Text(), nullable=True),
                sa.Column('how_es', sa.Text(), nullable=True),
                sa.Column('how_en', sa.Text(), nullable=True),
                sa.Column('examples', sa.JSON(), nullable=False),
                sa.Column('status', sa.String(length=32), nullable=False),
                sa.Column('created_at', sa.DateTime(), nullable=True),
                sa.Column('updated_at', sa.DateTime(), nullable=True),
                sa.PrimaryKeyConstraint('id'),
            )
            with op.batch_alter_table('term', schema=None) as batch_op:
                batch_op.create_index('ix_term_term', ['term'], unique=True)
                batch_op.create_index('ix_term_slug', ['slug'], unique=True)
                batch_op.create_index('ix_term_category', ['category'], unique=False)

        if not table_exists('term_variant'):
            op.create_table(
                'term_variant',
                *_child_columns(),
                sa.Column('language', sa.String(length=16), nullable=False),
                sa.Column('snippet', sa.Text(), nullable=False),
                sa.Column('notes', sa.Text(), nullable=True),
                sa.Column('level', sa.String(length=32), nullable=False),
                sa.Column('status', sa.String(length=32), nullable=False),
                *_child_constraints('term_variant'),
            )
            op.create_index('ix_term_variant_term_id', 'term_variant', ['term_id'], unique=False)

        if not table_exists('use_case'):
            op.create_table(
                'use_case',
                *_child_columns(),
                sa.Column('context', sa.String(length=32), nullable=False),
                sa.Column('summary', sa.Text(), nullable=False),
                sa.Column('steps', sa.JSON(), nullable=False),
                sa.Column('tips', sa.Text(), nullable=True),
                sa.Column('status', sa.String(length=32), nullable=False),
                *_child_constraints('use_case'),
            )
            op.create_index('ix_use_case_term_id', 'use_case', ['term_id'], unique=False)

        if not table_exists('faq'):
            op.create_table(
                'faq',
                *_child_columns(),
                sa.Column('question_es', sa.Text(), nullable=False),
                sa.Column('question_en', sa.Text(), nullable=False),
                sa.Column('answer_es', sa.Text(), nullable=False),
                sa.Column('answer_en', sa.Text(), nullable=False),
                sa.Column('snippet', sa.Text(), nullable=True),
                sa.Column('category', sa.String(length=255), nullable=True),
                sa.Column('how_to_explain', sa.Text(), nullable=True),
                sa.Column('status', sa.String(length=32), nullable=False),
                *_child_constraints('faq'),
            )
            op.create_index('ix_faq_term_id', 'faq', ['term_id'], unique=False)

        if not table_exists('exercise'):
            op.create_table(
                'exercise',
                *_child_columns(),
                sa.Column('title_es', sa.String(length=255), nullable=False),
                sa.Column('title_en', sa.String(length=255), nullable=False),
                sa.Column('prompt_es', sa.Text(), nullable=False),
                sa.Column('prompt_en', sa.Text(), nullable=False),
                sa.Column('difficulty', sa.String(length=16), nullable=False),
                sa.Column('solutions', sa.JSON(), nullable=False),
                sa.Column('status', sa.String(length=32), nullable=False),
                *_child_constraints('exercise'),
            )
            op.create_index('ix_exercise_term_id', 'exercise', ['term_id'], unique=False)

        if not table_exists('term_stats'):
            op.create_table(
                'term_stats',
                sa.Column('id', sa.Integer(), nullable=False),
                sa.Column('term_id', sa.Integer(), nullable=False),
                sa.Column('views', sa.Integer(), nullable=False, server_default='0'),
                sa.Column('context_hits', sa.JSON(), nullable=False),
                sa.Column('language_hits', sa.JSON(), nullable=False),
                sa.Column('created_at', sa.DateTime(), nullable=True),
                sa.ForeignKeyConstraint(['term_id'], ['term.id'], name='fk_term_stats_term_id', ondelete='CASCADE'),
                sa.PrimaryKeyConstraint('id'),
                sa.UniqueConstraint('term_id', name='uq_term_stats_term_id'),
            )


def downgrade():
    for table_name in ('term_stats', 'exercise', 'faq', 'use_case', 'term_variant', 'term'):
        if table_exists(table_name):
            op.drop_table(table_name)
