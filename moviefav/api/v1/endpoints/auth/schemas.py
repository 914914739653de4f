"""Authentication API schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserRegistrationRequest(BaseModel):
    """User registration request schema.

    Field constraints are checked by the authentication service so that
    every failure is reported in the same structured form.
    """

    name: Optional[str] = Field(
        None,
        description="Display name (2-50 characters)",
        examples=["Ann"],
    )
    email: Optional[str] = Field(
        None,
        description="User email address",
        examples=["ann@example.com"],
    )
    password: Optional[str] = Field(
        None,
        description="Password (at least 6 characters)",
        examples=["secret1"],
    )


class UserLoginRequest(BaseModel):
    """User login request schema.

    Missing fields are rejected by the authentication service as invalid
    credentials rather than as a malformed request.
    """

    email: Optional[str] = Field(
        None,
        description="User email address",
        examples=["ann@example.com"],
    )
    password: Optional[str] = Field(
        None,
        description="Password",
        examples=["secret1"],
    )


class UserResponse(BaseModel):
    """Public user view returned with a token."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="User unique identifier", examples=[1])
    name: str = Field(..., description="Display name", examples=["Ann"])
    email: str = Field(..., description="User email address", examples=["ann@example.com"])


class ProfileResponse(UserResponse):
    """Profile of the authenticated user."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    created_at: Optional[datetime] = Field(
        None,
        description="Account creation timestamp",
        examples=["2024-01-01T12:00:00Z"],
    )


class AuthResponse(BaseModel):
    """Token issued on registration or login."""

    token: str = Field(
        ...,
        description="JWT access token",
        examples=["eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."],
    )
    user: UserResponse
