"""Authentication API routes."""

from fastapi import APIRouter, Depends, status

from moviefav.api.dependencies import get_auth_service, get_current_identity
from moviefav.api.responses import ApiResponse
from moviefav.core.auth.entities import AuthResult, Identity
from moviefav.core.auth.services import AuthenticationService
from .schemas import (
    AuthResponse,
    ProfileResponse,
    UserLoginRequest,
    UserRegistrationRequest,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _auth_payload(result: AuthResult) -> AuthResponse:
    return AuthResponse(
        token=result.token,
        user=UserResponse.model_validate(result.identity),
    )


@router.post(
    "/register",
    response_model=ApiResponse[AuthResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account and return an access token.",
    responses={
        201: {"description": "User successfully created"},
        400: {"model": ApiResponse, "description": "Invalid input data"},
        409: {"model": ApiResponse, "description": "Email already registered"},
    },
)
async def register_user(
    user_data: UserRegistrationRequest,
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> ApiResponse[AuthResponse]:
    """
    Register a new user account.

    Email addresses are unique and stored lowercased.
    """
    result = await auth_service.register(
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
    )
    return ApiResponse(
        success=True,
        message="User created successfully",
        data=_auth_payload(result),
    )


@router.post(
    "/login",
    response_model=ApiResponse[AuthResponse],
    summary="User login",
    description="Authenticate user and return an access token.",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ApiResponse, "description": "Invalid credentials"},
    },
)
async def login(
    credentials: UserLoginRequest,
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> ApiResponse[AuthResponse]:
    """Authenticate user and return a JWT token."""
    result = await auth_service.login(
        email=credentials.email,
        password=credentials.password,
    )
    return ApiResponse(
        success=True,
        message="Login successful",
        data=_auth_payload(result),
    )


@router.get(
    "/profile",
    response_model=ApiResponse[ProfileResponse],
    summary="Get current user",
    description="Get information about the currently authenticated user.",
    responses={
        200: {"description": "User profile retrieved"},
        401: {"model": ApiResponse, "description": "Authentication required"},
        403: {"model": ApiResponse, "description": "Invalid or expired token"},
    },
)
async def get_profile(
    identity: Identity = Depends(get_current_identity),
    auth_service: AuthenticationService = Depends(get_auth_service),
) -> ApiResponse[ProfileResponse]:
    """Return the profile of the user the bearer token belongs to."""
    profile = await auth_service.get_profile(identity)
    return ApiResponse(
        success=True,
        message="User profile retrieved successfully",
        data=ProfileResponse.model_validate(profile),
    )
