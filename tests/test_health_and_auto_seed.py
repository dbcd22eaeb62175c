import pytest
from sqlalchemy.exc import OperationalError

from diccionario.extensions import db
from diccionario.models import Term
from diccionario.services.dictionary_seed import get_seed_coordinator


def test_health_reports_database_up(client):
    response = client.get('/api/health')

    assert response.status_code == 200
    payload = response.get_json()
    assert payload['status'] == 'ok'
    assert payload['db'] == 'up'
    assert payload['timestamp'].endswith('+00:00')


def test_health_reports_degraded_when_database_down(client, monkeypatch):
    def _down(*args, **kwargs):
        raise OperationalError('SELECT 1', {}, Exception('connection refused'))

    monkeypatch.setattr(db.session, 'execute', _down)

    response = client.get('/api/health')

    assert response.status_code == 503
    assert response.get_json() == {
        'status': 'degraded',
        'db': 'down',
        'timestamp': response.get_json()['timestamp'],
    }


def test_coordinator_is_registered_per_app(app):
    with app.app_context():
        coordinator = get_seed_coordinator()
        assert app.extensions['dictionary_seed'] is coordinator
        assert coordinator.max_items == 200
        assert coordinator.repository.children_policy.value == 'preserve'


def test_auto_seed_disabled_leaves_dictionary_empty(app, client):
    client.get('/')
    with app.app_context():
        assert Term.query.count() == 0


class TestAutoSeed:
    @pytest.fixture
    def app_config(self):
        return {'DICTIONARY_AUTO_SEED': True}

    def test_first_request_seeds_dictionary(self, app, client):
        client.get('/')

        with app.app_context():
            assert Term.query.count() == get_seed_coordinator(app).expected_count

    def test_health_check_does_not_trigger_seeding(self, app, client):
        client.get('/api/health')

        with app.app_context():
            assert Term.query.count() == 0
