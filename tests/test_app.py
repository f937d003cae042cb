"""Application factory, configuration and health endpoints."""
import pytest

from vetclinic import create_app
from vetclinic.config import DEFAULT_SECRET_KEY, ProductionConfig


def test_health_endpoints(client):
    for path in ('/health', '/health/ping', '/health/live'):
        resp = client.get(path)
        assert resp.status_code == 200
    resp = client.get('/health/ready')
    assert resp.get_json()['database'] == 'connected'


def test_security_headers(client):
    resp = client.get('/health')
    assert resp.headers['X-Content-Type-Options'] == 'nosniff'
    assert resp.headers['X-Frame-Options'] == 'DENY'


def test_method_not_allowed_is_json(client):
    resp = client.delete('/health')
    assert resp.status_code == 405
    assert resp.get_json()['success'] is False


def test_production_refuses_default_secret():
    with pytest.raises(ValueError):
        ProductionConfig.validate({'SECRET_KEY': DEFAULT_SECRET_KEY, 'JWT_SECRET_KEY': 'x' * 40})
    with pytest.raises(ValueError):
        ProductionConfig.validate({'SECRET_KEY': 'x' * 40, 'JWT_SECRET_KEY': ''})
    ProductionConfig.validate({'SECRET_KEY': 'x' * 40, 'JWT_SECRET_KEY': 'y' * 40})


def test_token_lifetime_defaults_to_two_hours(app):
    assert app.config['JWT_ACCESS_TOKEN_EXPIRES'].total_seconds() == 2 * 60 * 60
    assert app.config['JWT_IDENTITY_CLAIM'] == 'user_id'


def test_testing_config_selected():
    app = create_app('testing')
    assert app.testing
    assert app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite')


def test_seed_default_users_is_repeatable(app):
    from vetclinic.seeds import DEFAULT_USERS, seed_default_users

    created = seed_default_users()
    assert sorted(created) == sorted(u['email'] for u in DEFAULT_USERS)
    assert seed_default_users() == []


def test_cli_create_db(app):
    result = app.test_cli_runner().invoke(args=['create-db'])
    assert result.exit_code == 0
    assert 'Database tables created.' in result.output
