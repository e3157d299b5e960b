import os

# Cheap hashing and a fixed signing key for the whole test run
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-key")

import pytest
from fastapi.testclient import TestClient

from studyhub.core.config import Settings
from studyhub.core.database import EntityStore
from studyhub.main import create_app


@pytest.fixture
def store():
    """A fresh in-memory store per test."""
    store = EntityStore("sqlite+pysqlite:///:memory:")
    store.create_all()
    yield store
    store.dispose()


@pytest.fixture
def app(store):
    return create_app(Settings(), store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def register_user(client):
    """Registers a user and returns (user json, auth headers).

    The login cookie is dropped so each request authenticates only through
    the headers it is given.
    """
    def _register(username: str, name: str = None, password: str = "secret123"):
        response = client.post(
            "/api/register",
            json={"username": username, "password": password, "name": name or username.title()},
        )
        assert response.status_code == 201, response.text
        client.cookies.clear()
        body = response.json()
        return body["user"], {"Authorization": f"Bearer {body['accessToken']}"}

    return _register


@pytest.fixture
def create_group(client):
    def _create(headers, name: str = "Algebra", description: str = "Linear algebra study circle"):
        response = client.post("/api/groups", json={"name": name, "description": description}, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
