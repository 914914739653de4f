"""Integration tests for authentication API."""

from jose import jwt

from moviefav.settings import get_settings


class TestRegisterAPI:
    """Test the registration endpoint."""

    def test_register_success(self, client):
        """Test successful user registration."""
        response = client.post(
            "/api/v1/auth/register",
            json={"name": "Ann", "email": "Ann@Example.com ", "password": "secret1"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "User created successfully"
        assert body["errors"] is None
        assert body["data"]["user"]["name"] == "Ann"
        assert body["data"]["user"]["email"] == "ann@example.com"
        assert isinstance(body["data"]["user"]["id"], int)
        assert "password" not in body["data"]["user"]
        assert "hashed_password" not in body["data"]["user"]

    def test_register_token_carries_subject_and_email(self, client):
        """Test the issued token is signed with the configured secret."""
        response = client.post(
            "/api/v1/auth/register",
            json={"name": "Ann", "email": "ann@example.com", "password": "secret1"},
        )

        data = response.json()["data"]
        settings = get_settings()
        claims = jwt.decode(
            data["token"], settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
        assert claims["sub"] == str(data["user"]["id"])
        assert claims["email"] == "ann@example.com"
        assert claims["exp"] - claims["iat"] == settings.jwt_expires_in

    def test_register_duplicate_email(self, client, register_user):
        """Test a second registration with the same email, whatever the password."""
        register_user(email="ann@example.com", password="secret1")

        response = client.post(
            "/api/v1/auth/register",
            json={"name": "Other", "email": "ANN@example.com", "password": "different"},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "User already exists with this email"
        assert body["data"] is None

    def test_register_invalid_fields(self, client):
        """Test registration reports every invalid field."""
        response = client.post(
            "/api/v1/auth/register",
            json={"name": "A", "email": "not-an-email", "password": "123"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["errors"] == [
            {"field": "name", "message": "Name must be at least 2 characters long"},
            {"field": "email", "message": "Please provide a valid email address"},
            {"field": "password", "message": "Password must be at least 6 characters long"},
        ]
        assert body["message"] == (
            "Name must be at least 2 characters long, "
            "Please provide a valid email address, "
            "Password must be at least 6 characters long"
        )

    def test_register_missing_fields(self, client):
        """Test registration with an empty body."""
        response = client.post("/api/v1/auth/register", json={})

        assert response.status_code == 400
        fields = [error["field"] for error in response.json()["errors"]]
        assert fields == ["name", "email", "password"]


class TestLoginAPI:
    """Test the login endpoint."""

    def test_login_success(self, client, register_user):
        """Test registration then login with the same credentials."""
        registered = register_user()

        response = client.post(
            "/api/v1/auth/login",
            json={"email": " ANN@example.com", "password": "secret1"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Login successful"
        assert body["data"]["user"] == registered["user"]

        profile = client.get(
            "/api/v1/auth/profile",
            headers={"Authorization": f"Bearer {body['data']['token']}"},
        )
        assert profile.status_code == 200

    def test_login_wrong_password(self, client, register_user):
        """Test login with a wrong password."""
        register_user()

        response = client.post(
            "/api/v1/auth/login",
            json={"email": "ann@example.com", "password": "wrong-password"},
        )

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Invalid credentials"

    def test_login_unknown_email(self, client):
        """Test unknown email fails the same way as a wrong password."""
        response = client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "secret1"},
        )

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_login_missing_password(self, client, register_user):
        """Test login request without a password."""
        register_user()

        response = client.post("/api/v1/auth/login", json={"email": "ann@example.com"})

        assert response.status_code == 401
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Invalid credentials"
        assert body["errors"] is None

    def test_login_empty_body(self, client):
        response = client.post("/api/v1/auth/login", json={})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"


class TestProfileAPI:
    """Test the profile endpoint."""

    def test_get_profile(self, client, register_user):
        """Test profile of the token's user."""
        registered = register_user()

        response = client.get(
            "/api/v1/auth/profile",
            headers={"Authorization": f"Bearer {registered['token']}"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "User profile retrieved successfully"
        assert body["data"]["id"] == registered["user"]["id"]
        assert body["data"]["name"] == "Ann"
        assert body["data"]["email"] == "ann@example.com"
        assert body["data"]["createdAt"] is not None

    def test_get_profile_without_token(self, client):
        """Test profile without a bearer token."""
        response = client.get("/api/v1/auth/profile")

        assert response.status_code == 401
        assert response.json()["message"] == "Access token required"
