import pytest

from tablebook.app import create_app
from tablebook.config import Config
from tablebook.extensions import db


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    AUTO_CREATE_SCHEMA = True
    RESERVATION_STORE = "sql"
    TOTAL_TABLES = 25
    SLOT_MINUTES = 90
    RESET_SCHEDULER_ENABLED = False


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def service(app):
    return app.extensions["booking_service"]


@pytest.fixture
def testing_config():
    return TestingConfig
