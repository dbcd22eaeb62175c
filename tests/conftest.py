"""
Pytest configuration and shared fixtures for the dictionary tests.
"""
import os
import tempfile

import pytest

from diccionario import create_app
from diccionario.extensions import db
from diccionario.services.dictionary_seed import term_key

ADMIN_TOKEN = 'test-admin-token'


@pytest.fixture
def app_config():
    """Per-module config overrides; override this fixture in a test module."""
    return {}


@pytest.fixture(scope='function')
def app(app_config):
    """Create and configure a new app instance for each test."""
    db_fd, db_path = tempfile.mkstemp(suffix='.db')

    app = create_app({
        'TESTING': True,
        'DATABASE_URL': f'sqlite:///{db_path}',
        'SECRET_KEY': 'test-secret-key',
        'RATELIMIT_ENABLED': False,
        'ADMIN_TOKEN': ADMIN_TOKEN,
        'DICTIONARY_AUTO_SEED': False,
        'SEED_BATCH_SIZE': 200,
        'SEED_TIME_BUDGET_MS': 60_000,
        **app_config,
    })

    with app.app_context():
        db.create_all()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()

    os.close(db_fd)
    os.unlink(db_path)


@pytest.fixture
def client(app):
    """A test client for the app."""
    return app.test_client()


@pytest.fixture
def runner(app):
    """A test runner for the app's Click commands."""
    return app.test_cli_runner()


@pytest.fixture
def app_context(app):
    """Provide an application context for tests that need it."""
    with app.app_context():
        yield


@pytest.fixture
def admin_headers():
    return {'Authorization': f'Bearer {ADMIN_TOKEN}', 'Content-Type': 'application/json'}


class InMemoryTermRepository:
    """Dict-backed term store that records every call made against it."""

    def __init__(self, names=(), fail_stats_for=(), fail_upsert_for=()):
        self.rows = {}
        self.children = {}
        self.upserts = []
        self.stats_rows = set()
        self._next_id = 1
        self._fail_stats_for = set(fail_stats_for)
        self._fail_upsert_for = set(fail_upsert_for)
        for name in names:
            self.upsert_term(name, {})
        self.upserts.clear()

    def count_terms(self):
        return len(self.rows)

    def list_term_names(self):
        return set(self.rows)

    def upsert_term(self, key, fields, children=None):
        if key in self._fail_upsert_for:
            from diccionario.services.dictionary_seed import PersistenceFailure
            raise PersistenceFailure(f'upsert rejected for {key!r}', term=key)
        self.upserts.append(key)
        row = self.rows.get(key)
        if row is None:
            row = self.rows[key] = {'id': self._next_id}
            self._next_id += 1
            self.children[key] = children
        row.update(fields)
        return row['id']

    def ensure_stats_row(self, term_id):
        if any(row['id'] == term_id and name in self._fail_stats_for for name, row in self.rows.items()):
            raise RuntimeError(f'stats table unavailable for term id {term_id}')
        self.stats_rows.add(term_id)

    def keys(self):
        return {term_key(name) for name in self.rows}


@pytest.fixture
def memory_repository():
    """Factory for in-memory term stores."""
    return InMemoryTermRepository
