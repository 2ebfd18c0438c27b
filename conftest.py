from datetime import datetime, timedelta

import pytest

from app import create_app
from models import db, Client

NOW = datetime(2026, 3, 2, 9, 30)

TEST_CONFIG = {
    'TESTING': True,
    'SECRET_KEY': 'test-secret-key',
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'BASE_URL': 'https://ops.example.com',
    'MAIL_SERVER': None,
    'STAFF_NOTIFICATION_EMAILS': '',
}


class FixedClock:
    """Clock that only moves when told to"""

    def __init__(self, now=NOW):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)


@pytest.fixture
def app_config():
    return dict(TEST_CONFIG)


@pytest.fixture
def app(app_config):
    app = create_app(app_config)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def http(app):
    return app.test_client()


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def make_client(app):
    def _make(company_name='Acme Plumbing', **fields):
        client = Client(company_name=company_name, **fields)
        db.session.add(client)
        db.session.commit()
        return client
    return _make


@pytest.fixture
def acme_payload():
    return {
        'company_name': 'Acme Plumbing',
        'operational_contact': {'name': 'Jo', 'phone': '555', 'email': 'jo@x.com'},
        'location_type': 'storefront',
        'address': '1 Main St',
    }
