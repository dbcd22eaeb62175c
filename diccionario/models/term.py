from ..extensions import db
from ..utils.timezone_utils import TimezoneUtils
from .enums import ReviewStatus


class Term(db.Model):
    """Glossary entry keyed by its (case-sensitive) term name."""

    __tablename__ = 'term'

    id = db.Column(db.Integer, primary_key=True)
    term = db.Column(db.String(128), nullable=False, unique=True, index=True)
    translation = db.Column(db.String(255), nullable=False, default='')
    slug = db.Column(db.String(160), nullable=False, unique=True, index=True)
    title_es = db.Column(db.String(255))
    title_en = db.Column(db.String(255))
    aliases = db.Column(db.JSON, nullable=False, default=list)
    tags = db.Column(db.JSON, nullable=False, default=list)
    category = db.Column(db.String(32), nullable=False, index=True)

    # Spanish-first columns kept for the search UI
    meaning = db.Column(db.Text, nullable=False, default='')
    what = db.Column(db.Text, nullable=False, default='')
    how = db.Column(db.Text, nullable=False, default='')

    meaning_es = db.Column(db.Text)
    meaning_en = db.Column(db.Text)
    what_es = db.Column(db.Text)
    what_en = db.Column(db.Text)
    how_es = db.Column(db.Text)
    how_en = db.Column(db.Text)
    examples = db.Column(db.JSON, nullable=False, default=list)

    status = db.Column(db.String(32), nullable=False, default=ReviewStatus.PENDING.value)
    created_at = db.Column(db.DateTime, default=TimezoneUtils.utc_now)
    updated_at = db.Column(db.DateTime, default=TimezoneUtils.utc_now, onupdate=TimezoneUtils.utc_now)

    variants = db.relationship('TermVariant', backref='term', cascade='all, delete-orphan', lazy='select')
    use_cases = db.relationship('UseCase', backref='term', cascade='all, delete-orphan', lazy='select')
    faqs = db.relationship('Faq', backref='term', cascade='all, delete-orphan', lazy='select')
    exercises = db.relationship('Exercise', backref='term', cascade='all, delete-orphan', lazy='select')

    def __repr__(self):
        return f'<Term {self.term}>'


class TermVariant(db.Model):
    __tablename__ = 'term_variant'

    id = db.Column(db.Integer, primary_key=True)
    term_id = db.Column(db.Integer, db.ForeignKey('term.id', ondelete='CASCADE'), nullable=False, index=True)
    language = db.Column(db.String(16), nullable=False)
    snippet = db.Column(db.Text, nullable=False)
    notes = db.Column(db.Text)
    level = db.Column(db.String(32), nullable=False)
    status = db.Column(db.String(32), nullable=False, default=ReviewStatus.PENDING.value)


class UseCase(db.Model):
    __tablename__ = 'use_case'

    id = db.Column(db.Integer, primary_key=True)
    term_id = db.Column(db.Integer, db.ForeignKey('term.id', ondelete='CASCADE'), nullable=False, index=True)
    context = db.Column(db.String(32), nullable=False)
    summary = db.Column(db.Text, nullable=False)
    steps = db.Column(db.JSON, nullable=False, default=list)  # [{"es": ..., "en": ...}]
    tips = db.Column(db.Text)
    status = db.Column(db.String(32), nullable=False, default=ReviewStatus.PENDING.value)


class Faq(db.Model):
    __tablename__ = 'faq'

    id = db.Column(db.Integer, primary_key=True)
    term_id = db.Column(db.Integer, db.ForeignKey('term.id', ondelete='CASCADE'), nullable=False, index=True)
    question_es = db.Column(db.Text, nullable=False)
    question_en = db.Column(db.Text, nullable=False)
    answer_es = db.Column(db.Text, nullable=False)
    answer_en = db.Column(db.Text, nullable=False)
    snippet = db.Column(db.Text)
    category = db.Column(db.String(255))
    how_to_explain = db.Column(db.Text)
    status = db.Column(db.String(32), nullable=False, default=ReviewStatus.PENDING.value)


class Exercise(db.Model):
    __tablename__ = 'exercise'

    id = db.Column(db.Integer, primary_key=True)
    term_id = db.Column(db.Integer, db.ForeignKey('term.id', ondelete='CASCADE'), nullable=False, index=True)
    title_es = db.Column(db.String(255), nullable=False)
    title_en = db.Column(db.String(255), nullable=False)
    prompt_es = db.Column(db.Text, nullable=False)
    prompt_en = db.Column(db.Text, nullable=False)
    difficulty = db.Column(db.String(16), nullable=False)
    solutions = db.Column(db.JSON, nullable=False, default=list)
    status = db.Column(db.String(32), nullable=False, default=ReviewStatus.PENDING.value)
