# File: tests/conftest.py

"""
Shared fixtures. Every test gets a fresh app backed by in-memory SQLite.

To run:
    pytest -q
"""

import pytest
from fastapi.testclient import TestClient

from blog_api.core.config import Settings
from blog_api.main import create_application

TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        secret_key=TEST_SECRET,
        password_hash_iterations=1_000,
        access_token_expire_minutes=None,
    )


@pytest.fixture
def client(settings):
    app = create_application(settings)
    with TestClient(app) as c:
        yield c


def signup(client, email: str, password: str = "Secret123", name: str | None = None) -> dict:
    body = {"email": email, "password": password}
    if name is not None:
        body["name"] = name
    resp = client.post("/api/v1/user/signup", json=body)
    assert resp.status_code == 200, resp.text
    return resp.json()


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice(client) -> dict:
    return signup(client, "alice@x.com", name="Alice")


@pytest.fixture
def bob(client) -> dict:
    return signup(client, "bob@y.com", name="Bob")
