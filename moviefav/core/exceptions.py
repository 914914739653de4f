"""Domain exceptions shared across the application."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class FieldError:
    """
    A single validation failure.

    Attributes:
        field: Name of the offending input field
        message: Human-readable description of the failure
    """

    field: str
    message: str


class DomainException(Exception):
    """Base exception for domain-related errors."""

    status_code: int = 400

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationException(DomainException):
    """Raised when input fails shape or constraint checks."""

    def __init__(self, errors: List[FieldError]) -> None:
        """
        Initialize validation exception.

        Args:
            errors: Field-level failures; the message joins them for display
        """
        message = ", ".join(error.message for error in errors) or "Validation failed"
        super().__init__(message, f"Fields: {[error.field for error in errors]}")
        self.errors = list(errors)


class ServerErrorException(DomainException):
    """Raised when the store or other infrastructure fails unexpectedly."""

    status_code = 500

    def __init__(self, message: str = "Server error") -> None:
        super().__init__(message)
