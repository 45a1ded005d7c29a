"""Shared test configuration and fixtures for the TEDx NDU backend tests"""

import logging

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from tedx_ndu.app import create_app
from tedx_ndu.models.database import create_tables
from tedx_ndu.services.contact_service import ContactService
from tedx_ndu.services.registration_service import RegistrationService
from tedx_ndu.services.user_service import UserService
from tests.config import test_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ADMIN_USERNAME = test_config["admin_username"]
ADMIN_PASSWORD = test_config["admin_password"]

TEST_SETTINGS = test_config["app_settings"]


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of one test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def _db_session(engine):
    """Private DB session for fixtures only.

    Prefer the service fixtures below in tests.
    """
    session = Session(engine)
    yield session
    session.close()


@pytest.fixture
def registration_service(_db_session):
    return RegistrationService(_db_session)


@pytest.fixture
def contact_service(_db_session):
    return ContactService(_db_session)


@pytest.fixture
def user_service(_db_session):
    return UserService(_db_session)


@pytest.fixture
def make_app(engine):
    """Factory for apps bound to the test engine, with optional overrides"""

    def _make_app(**overrides):
        return create_app(settings={**TEST_SETTINGS, **overrides}, engine=engine)

    return _make_app


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def admin_user(user_service):
    """Seeded admin account"""
    return user_service.create_user(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def admin_client(client, admin_user):
    """Test client holding a logged-in admin session cookie"""
    response = client.post(
        "/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200, response.text
    return client


@pytest.fixture
def registration_payload():
    return {
        "firstName": "Aysel",
        "lastName": "Quliyeva",
        "email": "aysel@example.com",
        "phone": "+994501234567",
        "occupation": "student",
        "topics": ["technology", "education"],
        "terms": True,
    }


@pytest.fixture
def contact_payload():
    return {
        "name": "Kamran Babayev",
        "email": "kamran@example.com",
        "subject": "Sponsorship",
        "message": "We would like to support the event next year.",
    }
