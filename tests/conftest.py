import pytest

from library_lending import create_app
from library_lending.config import TestConfig
from library_lending.extensions import db
from library_lending.seed import seed_demo_data


@pytest.fixture
def app():
    # fresh in-memory database for every test
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    """Demo data: borrow 1 (reader 1, book 1) outstanding, borrow 2 (reader 2, book 2) returned."""
    assert seed_demo_data() is True
    return app
