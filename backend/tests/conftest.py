"""Pytest configuration and fixtures"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from filmly.api.deps import get_store
from filmly.config import settings
from filmly.main import app
from filmly.store import FilmStore

API = settings.API_PREFIX


@pytest.fixture(scope="function")
def store() -> FilmStore:
    """Fresh seeded store for each test"""
    return FilmStore()


@pytest.fixture(scope="function")
def client(store: FilmStore) -> Generator[TestClient, None, None]:
    """Create test client with store override"""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def credentials() -> dict:
    """Valid login body"""
    return {"email": "  User@Example.com ", "password": "secret"}


@pytest.fixture
def token(client: TestClient, credentials: dict) -> str:
    """Access token from a successful login"""
    response = client.post(f"{API}/auth", json=credentials)
    assert response.status_code == 200
    return response.json()["accessToken"]


@pytest.fixture
def auth_headers(token: str) -> dict:
    """Bearer authentication headers"""
    return {"Authorization": f"Bearer {token}"}
