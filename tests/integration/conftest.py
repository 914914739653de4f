"""Common fixtures for integration tests."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from moviefav.core.auth.entities import Identity


@pytest.fixture(scope="function")
def client(tmp_path):
    """Create test client backed by a fresh SQLite database."""
    from tests.integration.test_app import create_test_app

    app = create_test_app(f"sqlite+aiosqlite:///{tmp_path / 'test_integration.sqlite'}")

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Register a user through the API and return the response data."""

    def _register(name="Ann", email="ann@example.com", password="secret1"):
        response = client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _register


@pytest.fixture
def auth_headers(register_user):
    """Authorization headers for a freshly registered user."""
    data = register_user()
    return {"Authorization": f"Bearer {data['token']}"}


@pytest.fixture
def dune():
    """Favorite payload for a well-known movie."""
    return {
        "movieId": 42,
        "title": "Dune",
        "poster": "/dune.jpg",
        "overview": "Spice.",
        "releaseDate": "2021-10-22",
        "rating": 8.0,
    }


@pytest.fixture
def mock_identity():
    """Identity the access guard resolves in mocked tests."""
    return Identity(id=1, name="Ann", email="ann@example.com")


@pytest.fixture
def mock_favorites_service():
    """Create a mock favorites service."""
    service = AsyncMock()
    service.list = AsyncMock()
    service.add = AsyncMock()
    service.remove = AsyncMock()
    service.check_status = AsyncMock()
    service.count = AsyncMock()
    return service


@pytest.fixture
def override_favorites_dependency(client, mock_favorites_service, mock_identity):
    """Override the favorites service and the access guard."""
    app = client.app

    from moviefav.api.dependencies import get_current_identity, get_favorites_service
    app.dependency_overrides[get_favorites_service] = lambda: mock_favorites_service
    app.dependency_overrides[get_current_identity] = lambda: mock_identity
    yield mock_favorites_service
    app.dependency_overrides.pop(get_favorites_service, None)
    app.dependency_overrides.pop(get_current_identity, None)
