"""Tests for authentication entities."""

import pytest
from datetime import datetime

from moviefav.core.auth.entities import AuthResult, Identity, TokenPayload, User


class TestUser:
    """Test cases for User entity."""

    def test_valid_user_creation(self):
        """Test creating valid user."""
        user = User(
            id=1,
            name="Ann",
            email="ann@example.com",
            hashed_password="hashed_password_123",
        )

        assert user.id == 1
        assert user.name == "Ann"
        assert user.email == "ann@example.com"
        assert user.created_at is None

    def test_user_empty_name_raises_error(self):
        """Test that empty name raises ValueError."""
        with pytest.raises(ValueError, match="Name cannot be empty"):
            User(id=1, name="", email="ann@example.com", hashed_password="hash")

    def test_user_empty_email_raises_error(self):
        with pytest.raises(ValueError, match="Email cannot be empty"):
            User(id=1, name="Ann", email="", hashed_password="hash")

    def test_user_empty_password_raises_error(self):
        with pytest.raises(ValueError, match="Hashed password cannot be empty"):
            User(id=1, name="Ann", email="ann@example.com", hashed_password="")

    def test_user_invalid_email_raises_error(self):
        """Test that invalid email format raises ValueError."""
        with pytest.raises(ValueError, match="Invalid email format"):
            User(id=1, name="Ann", email="ann.example.com", hashed_password="hash")

    def test_to_identity_drops_password(self):
        """Test identity carries the public fields only."""
        created = datetime(2024, 1, 1, 12, 0, 0)
        user = User(
            id=7,
            name="Ann",
            email="ann@example.com",
            hashed_password="hash",
            created_at=created,
        )

        identity = user.to_identity()

        assert identity == Identity(id=7, name="Ann", email="ann@example.com", created_at=created)
        assert not hasattr(identity, "hashed_password")


class TestTokenPayload:
    """Test cases for TokenPayload entity."""

    def test_valid_payload(self):
        payload = TokenPayload(sub="1", email="ann@example.com", exp=200, iat=100)

        assert payload.sub == "1"
        assert payload.exp == 200

    def test_empty_subject_raises_error(self):
        with pytest.raises(ValueError, match="Subject cannot be empty"):
            TokenPayload(sub="", email="ann@example.com", exp=200, iat=100)

    def test_expiry_before_issue_raises_error(self):
        """Test that expiry must come after issue time."""
        with pytest.raises(ValueError, match="Expiration must be after issued time"):
            TokenPayload(sub="1", email="ann@example.com", exp=100, iat=100)


class TestAuthResult:
    """Test cases for AuthResult entity."""

    def test_empty_token_raises_error(self):
        identity = Identity(id=1, name="Ann", email="ann@example.com")

        with pytest.raises(ValueError, match="Token cannot be empty"):
            AuthResult(token="", identity=identity)
