"""Authentication domain entities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """
    User entity as stored in the credential store.

    Attributes:
        id: Unique user identifier
        name: Display name
        email: Lowercased, unique email address
        hashed_password: One-way password hash
        created_at: Account creation timestamp
    """

    id: int
    name: str
    email: str
    hashed_password: str
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate user data after initialization."""
        if not self.name:
            raise ValueError("Name cannot be empty")
        if not self.email:
            raise ValueError("Email cannot be empty")
        if not self.hashed_password:
            raise ValueError("Hashed password cannot be empty")
        if "@" not in self.email:
            raise ValueError("Invalid email format")

    def to_identity(self) -> "Identity":
        """Public view of the user, without the password hash."""
        return Identity(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
        )


@dataclass(frozen=True)
class Identity:
    """
    Authenticated user resolved from a bearer token.

    Attributes:
        id: User identifier
        name: Display name
        email: Email address
        created_at: Account creation timestamp
    """

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class TokenPayload:
    """
    JWT token payload data.

    Attributes:
        sub: Subject (user ID)
        email: Email of the subject at issuance
        exp: Expiration timestamp
        iat: Issued at timestamp
    """

    sub: str
    email: str
    exp: int
    iat: int

    def __post_init__(self) -> None:
        """Validate token payload data."""
        if not self.sub:
            raise ValueError("Subject cannot be empty")
        if self.exp <= self.iat:
            raise ValueError("Expiration must be after issued time")


@dataclass(frozen=True)
class AuthResult:
    """Token issued on registration or login, with the public user view."""

    token: str
    identity: Identity

    def __post_init__(self) -> None:
        if not self.token:
            raise ValueError("Token cannot be empty")
