"""Integration tests for bearer token handling on protected routes."""

from datetime import datetime, timedelta, timezone

import pytest

from moviefav.core.auth.entities import User
from moviefav.core.auth.services import TokenService

PROTECTED_ROUTES = [
    ("GET", "/api/v1/auth/profile"),
    ("GET", "/api/v1/favorites"),
    ("GET", "/api/v1/favorites/count"),
    ("GET", "/api/v1/favorites/check/42"),
    ("DELETE", "/api/v1/favorites/42"),
]


def _user(user_id: int) -> User:
    return User(
        id=user_id,
        name="Ann",
        email="ann@example.com",
        hashed_password="$2b$04$hashed_password",
    )


class TestAccessGuard:
    """Test token rejection paths of the access guard."""

    @pytest.mark.parametrize("method,path", PROTECTED_ROUTES)
    def test_missing_token(self, client, method, path):
        """Test every protected route rejects a request without a token."""
        response = client.request(method, path)

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Access token required"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_non_bearer_scheme(self, client):
        """Test a non-bearer authorization header counts as missing."""
        response = client.get(
            "/api/v1/favorites", headers={"Authorization": "Basic YW5uOnNlY3JldA=="}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Access token required"

    def test_malformed_token(self, client):
        """Test a token that is not a JWT."""
        response = client.get(
            "/api/v1/favorites", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Invalid or expired token"

    def test_forged_token(self, client, register_user):
        """Test a token signed with a different secret."""
        registered = register_user()
        forged = TokenService(secret_key="some-other-secret").create_access_token(
            _user(registered["user"]["id"])
        )

        response = client.get(
            "/api/v1/auth/profile", headers={"Authorization": f"Bearer {forged}"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Invalid or expired token"

    def test_expired_token(self, client, register_user):
        """Test a correctly signed token past its expiry."""
        registered = register_user()
        token_service = TokenService(expires_in=60)
        issued_at = datetime.now(timezone.utc) - timedelta(hours=1)
        expired = token_service.create_access_token(
            _user(registered["user"]["id"]), issued_at=issued_at
        )

        response = client.get(
            "/api/v1/auth/profile", headers={"Authorization": f"Bearer {expired}"}
        )

        assert response.status_code == 403
        assert response.json()["message"] == "Invalid or expired token"

    def test_token_for_missing_user(self, client):
        """Test a valid token whose user does not exist."""
        token = TokenService().create_access_token(_user(9999))

        response = client.get(
            "/api/v1/favorites", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid token"

    def test_valid_token(self, client, auth_headers):
        """Test a freshly issued token passes the guard."""
        response = client.get("/api/v1/favorites", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == []
