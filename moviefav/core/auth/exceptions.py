"""Authentication exceptions."""

from moviefav.core.exceptions import DomainException


class AuthenticationException(DomainException):
    """Base exception for authentication errors."""

    status_code = 401


class InvalidCredentialsException(AuthenticationException):
    """Raised when login credentials are invalid.

    Covers both an unknown email and a wrong password.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class DuplicateEmailException(AuthenticationException):
    """Raised when trying to register an email that already exists."""

    status_code = 409

    def __init__(self, email: str) -> None:
        super().__init__("User already exists with this email", f"Email: {email}")
        self.email = email


class UnauthenticatedException(AuthenticationException):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self) -> None:
        super().__init__("Access token required")


class TokenRejectedException(AuthenticationException):
    """Raised when a token fails signature, expiry or format checks."""

    status_code = 403

    def __init__(self, reason: str = "Token decode error") -> None:
        super().__init__("Invalid or expired token", reason)


class InvalidTokenException(AuthenticationException):
    """Raised when a token verifies but its subject no longer exists."""

    def __init__(self, subject: str = "") -> None:
        super().__init__("Invalid token", f"Subject: {subject}")
        self.subject = subject
