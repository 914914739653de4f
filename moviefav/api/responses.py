"""Uniform response envelope for every API route."""

from typing import Generic, List, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from moviefav.core.exceptions import FieldError

T = TypeVar("T")


class FieldErrorSchema(BaseModel):
    """Field-level validation error."""

    field: str = Field(..., description="Offending input field", examples=["email"])
    message: str = Field(
        ...,
        description="What is wrong with the field",
        examples=["Please provide a valid email address"],
    )


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every response payload."""

    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(..., description="Human-readable outcome", examples=["OK"])
    data: Optional[T] = Field(None, description="Response payload")
    errors: Optional[List[FieldErrorSchema]] = Field(
        None, description="Field-level validation errors"
    )


def error_response(
    status_code: int,
    message: str,
    errors: Optional[List[FieldError]] = None,
    headers: Optional[dict] = None,
) -> JSONResponse:
    """Build a failure envelope as a JSON response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "message": message,
            "data": None,
            "errors": (
                [{"field": error.field, "message": error.message} for error in errors]
                if errors
                else None
            ),
        },
        headers=headers,
    )
