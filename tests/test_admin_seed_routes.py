import pytest

from diccionario.models import Term, TermStats
from diccionario.seeders.catalogs import expected_term_keys


def test_seed_requires_bearer_token(client):
    response = client.post('/api/admin/seed')
    assert response.status_code == 401
    assert response.get_json()['success'] is False


def test_seed_rejects_wrong_token(client):
    response = client.post('/api/admin/seed', headers={'Authorization': 'Bearer nope'})
    assert response.status_code == 401


def test_seed_rejects_every_call_when_token_unset(app, client, admin_headers):
    app.config['ADMIN_TOKEN'] = None
    response = client.post('/api/admin/seed', headers=admin_headers)
    assert response.status_code == 401


def test_seed_fills_empty_dictionary(app, client, admin_headers):
    response = client.post('/api/admin/seed', headers=admin_headers)

    assert response.status_code == 200
    payload = response.get_json()
    data = payload['data']
    expected = len(expected_term_keys())
    assert payload['message'] == 'Dictionary seed batch finished'
    assert data['before'] == 0
    assert data['after'] == expected
    assert data['added'] == expected
    assert data['result']['completed'] is True
    assert data['result']['remaining'] == 0

    with app.app_context():
        assert Term.query.count() == expected
        assert TermStats.query.count() == expected


def test_seed_without_force_reports_already_seeded(client, admin_headers):
    client.post('/api/admin/seed', headers=admin_headers)

    response = client.post('/api/admin/seed?force=false', headers=admin_headers)

    payload = response.get_json()
    assert response.status_code == 200
    assert payload['message'] == 'Dictionary already seeded'
    assert payload['data']['added'] == 0
    assert payload['data']['result'] is None


def test_forced_seed_on_full_dictionary_adds_nothing(client, admin_headers):
    client.post('/api/admin/seed', headers=admin_headers)

    response = client.post('/api/admin/seed', headers=admin_headers, json={'force': True})

    data = response.get_json()['data']
    assert data['added'] == 0
    assert data['result']['processed'] == 0
    assert data['result']['completed'] is True


def test_status_reports_missing_terms(client, admin_headers):
    before = client.get('/api/admin/seed/status', headers=admin_headers).get_json()['data']
    client.post('/api/admin/seed', headers=admin_headers)
    after = client.get('/api/admin/seed/status', headers=admin_headers).get_json()['data']

    assert before['current'] == 0
    assert before['missing'] == before['expected'] == len(expected_term_keys())
    assert after['current'] == after['expected']
    assert after['missing'] == 0
    assert after['running'] is False


def test_status_requires_token(client):
    assert client.get('/api/admin/seed/status').status_code == 401


class TestSeedRateLimit:
    @pytest.fixture
    def app_config(self):
        return {'RATELIMIT_ENABLED': True, 'ADMIN_SEED_RATE_LIMIT': '1 per minute'}

    def test_second_seed_call_is_rate_limited(self, client, admin_headers):
        assert client.post('/api/admin/seed?force=0', headers=admin_headers).status_code == 200

        response = client.post('/api/admin/seed?force=0', headers=admin_headers)

        assert response.status_code == 429
        assert response.get_json()['success'] is False
