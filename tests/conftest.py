"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from thelook.auth import create_access_token
from thelook.config import Settings
from thelook.main import create_app
from thelook.models import Service, User

TEST_SECRET = "test-secret"


@pytest.fixture
def settings():
    """Settings for an isolated in-memory database."""
    return Settings(
        database_url="sqlite://",
        jwt_secret=TEST_SECRET,
        stripe_secret_key="sk_test_123",
        seed_catalog=False,
        _env_file=None,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Test client running inside the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session(client):
    with Session(client.app.state.engine) as db_session:
        yield db_session


@pytest.fixture
def make_user(session):
    """Insert a user directly and return it."""
    def _make_user(email: str, role=None, name=None) -> User:
        user = User(email=email, role=role, name=name)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_service(session):
    def _make_service(name: str, slots, price: float = 20) -> Service:
        service = Service(name=name, price=price, slots=list(slots))
        session.add(service)
        session.commit()
        session.refresh(service)
        return service
    return _make_service


@pytest.fixture
def auth_header(settings):
    """Bearer header for a token issued to `email`."""
    def _auth_header(email: str) -> dict:
        token = create_access_token(email, settings)
        return {"Authorization": f"Bearer {token}"}
    return _auth_header


@pytest.fixture
def admin_headers(make_user, auth_header):
    make_user("admin@thelook.com", role="admin")
    return auth_header("admin@thelook.com")
