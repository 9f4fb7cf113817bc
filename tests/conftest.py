"""Pytest configuration and fixtures."""

import pytest

from app import create_app
from db.database import get_database


@pytest.fixture
def app(tmp_path):
    """A fresh app backed by its own SQLite file."""
    app = create_app(
        {
            "TESTING": True,
            "DATABASE_URL": f"sqlite:///{tmp_path / 'test.db'}",
            "BCRYPT_ROUNDS": 4,
            "LOG_REQUESTS": False,
        }
    )
    yield app
    get_database(app).close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return app.extensions["user_store"]


@pytest.fixture
def register_user(client):
    """Register a user through the API; keyword arguments override the defaults."""

    def _register(**overrides):
        payload = {"name": "Test User", "email": "test@example.com", "password": "testpass123"}
        payload.update(overrides)
        return client.post("/api/register", json=payload)

    return _register
