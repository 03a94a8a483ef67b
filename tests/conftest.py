"""Shared test fixtures."""

import re

import pytest

from app import create_app, init_db
from models import db
from services import MemoryOptionStore

LOGIN_URL = '/admin/login'
SETTINGS_URL = '/admin/options/cf_web_analytics'

CSRF_RE = re.compile(r'name="csrf_token" value="([^"]+)"')


def csrf_token_from(client, url):
    """CSRF token from the hidden field of the form rendered at url."""
    body = client.get(url).get_data(as_text=True)
    match = CSRF_RE.search(body)
    assert match, f'no csrf_token field on {url}'
    return match.group(1)


@pytest.fixture
def app():
    """App bound to a fresh in-memory database."""
    app = create_app('testing')
    init_db(app)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    """Test client with a logged-in admin session."""
    client = app.test_client()
    token = csrf_token_from(client, LOGIN_URL)
    response = client.post(LOGIN_URL, data={'password': app.config['ADMIN_PASSWORD'], 'csrf_token': token})
    assert response.status_code == 302
    return client


@pytest.fixture
def save_token(admin_client):
    """Submit the settings form as the logged-in admin."""
    def save(value, follow_redirects=False):
        data = {'csrf_token': csrf_token_from(admin_client, SETTINGS_URL)}
        if value is not None:
            data['cf_web_analytics_options[token]'] = value
        return admin_client.post(SETTINGS_URL, data=data, follow_redirects=follow_redirects)
    return save


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


@pytest.fixture
def store():
    return MemoryOptionStore()
