"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from gift_tracker.config import Settings
from gift_tracker.database import init_db
from gift_tracker.main import create_app

TEST_PASSWORD = "testpass123"


class AuthHeaders(dict):
    """Dict subclass that also stores the registered user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a fresh SQLite file per test."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        jwt_secret="test-secret",  # noqa: S106
        environment="test",
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    """Application with its schema created (for transports that skip lifespan)."""
    application = create_app(settings)
    init_db(application.state.context.engine)
    return application


@pytest.fixture
def authenticator(app):
    return app.state.context.authenticator


@pytest.fixture
def client(app):
    """Create a test client running the application lifespan."""
    with TestClient(app) as test_client:
        yield test_client


def register_user(client, email: str, name: str = "Test User", password: str = TEST_PASSWORD):
    """Register a user and return auth headers carrying their id and email."""
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register_user(client, "alice@example.com", name="Alice")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated account."""
    return register_user(client, "carol@example.com", name="Carol")


@pytest.fixture
def person(client, auth_headers):
    """A person owned by the auth_headers user."""
    response = client.post("/api/people", headers=auth_headers, json={"name": "Bob"})
    assert response.status_code == 201
    return response.json()
