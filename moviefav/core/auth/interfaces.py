"""Authentication service interfaces."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from .entities import User, TokenPayload


class PasswordServiceInterface(ABC):
    """Interface for password hashing and verification."""

    @abstractmethod
    def hash_password(self, password: str) -> str:
        """
        Hash a password securely.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        pass

    @abstractmethod
    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Verify password against hash.

        Args:
            password: Plain text password
            hashed_password: Stored password hash

        Returns:
            True if password matches, False otherwise
        """
        pass


class TokenServiceInterface(ABC):
    """Interface for JWT token operations."""

    @abstractmethod
    def create_access_token(self, user: User, issued_at: Optional[datetime] = None) -> str:
        """
        Create signed access token for user.

        Args:
            user: User entity
            issued_at: Issue time, defaults to now

        Returns:
            JWT access token string
        """
        pass

    @abstractmethod
    def decode_token(self, token: str) -> TokenPayload:
        """
        Decode and validate JWT token.

        Args:
            token: JWT token string

        Returns:
            Token payload data

        Raises:
            TokenRejectedException: If token is malformed, forged or expired
        """
        pass


class UserRepositoryInterface(ABC):
    """Interface for user data access operations."""

    @abstractmethod
    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User identifier

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: Normalized email address

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def create_user(self, name: str, email: str, hashed_password: str) -> User:
        """
        Create new user.

        Args:
            name: Display name
            email: Normalized email address
            hashed_password: Password hash

        Returns:
            Created user entity with ID

        Raises:
            DuplicateEmailException: If the email is already taken
        """
        pass
