"""Registration input validation."""

import re
from typing import List, Optional

from moviefav.core.exceptions import FieldError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
PASSWORD_MIN_LENGTH = 6


def normalize_email(email: Optional[str]) -> str:
    """Trim and lowercase an email address."""
    return (email or "").strip().lower()


def validate_registration(
    name: Optional[str], email: Optional[str], password: Optional[str]
) -> List[FieldError]:
    """
    Check registration fields against the user constraints.

    Args:
        name: Display name, trimmed before checking
        email: Email address, normalized before checking
        password: Plain text password

    Returns:
        Field errors in field order; empty when the input is valid
    """
    errors: List[FieldError] = []

    name = (name or "").strip()
    if not name:
        errors.append(FieldError("name", "Name is required"))
    elif len(name) < NAME_MIN_LENGTH:
        errors.append(
            FieldError("name", f"Name must be at least {NAME_MIN_LENGTH} characters long")
        )
    elif len(name) > NAME_MAX_LENGTH:
        errors.append(FieldError("name", f"Name cannot exceed {NAME_MAX_LENGTH} characters"))

    email = normalize_email(email)
    if not email:
        errors.append(FieldError("email", "Email is required"))
    elif not EMAIL_PATTERN.match(email):
        errors.append(FieldError("email", "Please provide a valid email address"))

    if not password:
        errors.append(FieldError("password", "Password is required"))
    elif len(password) < PASSWORD_MIN_LENGTH:
        errors.append(
            FieldError(
                "password",
                f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
            )
        )

    return errors
