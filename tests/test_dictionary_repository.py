import pytest
from sqlalchemy.exc import OperationalError

from diccionario.extensions import db
from diccionario.models import ChildrenPolicy, Term, TermStats
from diccionario.services.dictionary_seed import (
    PersistenceFailure,
    RawTermInput,
    SqlAlchemyTermRepository,
    TermChildren,
    normalize,
)
from diccionario.services.dictionary_seed.repository import scalar_fields


def _record(term='fetch', **overrides):
    data = {
        'term': term,
        'translation': 'traer datos',
        'category': 'frontend',
        'description_es': 'una API del navegador',
        'example': {'title_es': 'GET', 'title_en': 'GET', 'code': 'fetch("/api")'},
    }
    data.update(overrides)
    return normalize(RawTermInput.from_mapping(data))


def _upsert(repo, record):
    return repo.upsert_term(record.term, scalar_fields(record), TermChildren.from_term(record))


def test_insert_creates_term_with_children(app_context):
    repo = SqlAlchemyTermRepository()

    term_id = _upsert(repo, _record())
    term = db.session.get(Term, term_id)

    assert term.term == 'fetch'
    assert term.slug == 'fetch'
    assert term.status == 'approved'
    assert term.what == term.what_es
    assert term.meaning == term.meaning_es
    assert term.examples == [{'title_es': 'GET', 'title_en': 'GET', 'code': 'fetch("/api")'}]
    assert len(term.variants) == 1
    assert len(term.use_cases) == 3
    assert len(term.faqs) == 1
    assert len(term.exercises) == 1
    assert term.exercises[0].difficulty == 'medium'
    assert term.exercises[0].solutions[0]['language'] == 'ts'


def test_use_case_rows_pair_bilingual_steps(app_context):
    repo = SqlAlchemyTermRepository()
    term = db.session.get(Term, _upsert(repo, _record()))

    project = next(u for u in term.use_cases if u.context == 'project')
    assert ' | ' in project.summary
    assert project.steps[0]['es'].startswith('Describe el problema')
    assert project.steps[0]['en'].startswith('Describe the problem')
    assert project.tips == (
        'Conecta el concepto con un proyecto o métrica real. | Connect the concept with a real project or metric.'
    )


def test_count_and_list_names(app_context):
    repo = SqlAlchemyTermRepository()
    _upsert(repo, _record('fetch'))
    _upsert(repo, _record('JWT', category='backend'))

    assert repo.count_terms() == 2
    assert repo.list_term_names() == {'fetch', 'JWT'}


def test_update_rewrites_scalars_and_preserves_children(app_context):
    repo = SqlAlchemyTermRepository(children_policy=ChildrenPolicy.PRESERVE)
    term_id = _upsert(repo, _record())

    second_id = _upsert(repo, _record(translation='pedir datos', tags=['http']))
    term = db.session.get(Term, term_id)

    assert second_id == term_id
    assert term.translation == 'pedir datos'
    assert term.tags == ['http']
    assert len(term.use_cases) == 3
    assert Term.query.count() == 1


def test_replace_policy_rewrites_children(app_context):
    repo = SqlAlchemyTermRepository(children_policy='replace')
    record = _record()
    _upsert(repo, record)
    doubled = TermChildren(
        variants=record.variants * 2,
        use_cases=record.use_cases,
        faqs=record.faqs * 2,
        exercises=record.exercises,
    )

    term_id = repo.upsert_term(record.term, scalar_fields(record), doubled)
    term = db.session.get(Term, term_id)

    assert len(term.variants) == 2
    assert len(term.faqs) == 2
    assert len(term.use_cases) == 3


def test_ensure_stats_row_is_idempotent(app_context):
    repo = SqlAlchemyTermRepository()
    term_id = _upsert(repo, _record())

    repo.ensure_stats_row(term_id)
    repo.ensure_stats_row(term_id)

    stats = TermStats.query.filter_by(term_id=term_id).all()
    assert len(stats) == 1
    assert stats[0].views == 0
    assert stats[0].context_hits == {}


def test_database_errors_become_persistence_failures(app_context, monkeypatch):
    repo = SqlAlchemyTermRepository()

    def _broken_query(*args, **kwargs):
        raise OperationalError('SELECT', {}, Exception('database is locked'))

    monkeypatch.setattr(db.session, 'query', _broken_query)

    with pytest.raises(PersistenceFailure) as excinfo:
        repo.upsert_term('fetch', {})
    assert excinfo.value.term == 'fetch'

    with pytest.raises(PersistenceFailure):
        repo.count_terms()
