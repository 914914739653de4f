"""FastAPI dependency injection setup."""

import logging
from functools import lru_cache
from typing import AsyncGenerator, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from moviefav.core.auth.entities import Identity
from moviefav.core.auth.exceptions import TokenRejectedException, UnauthenticatedException
from moviefav.core.auth.services import AuthenticationService, PasswordService, TokenService
from moviefav.core.favorites.services import FavoritesService
from moviefav.infrastructure.database.repositories.favorite_repository import SqlFavoriteRepository
from moviefav.infrastructure.database.repositories.user_repository import SqlUserRepository
from moviefav.infrastructure.database.session import get_session

logger = logging.getLogger("moviefav.auth")

bearer_scheme = HTTPBearer(auto_error=False)


async def get_database_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provide database session for dependency injection.

    Yields:
        AsyncSession: Database session
    """
    async for session in get_session():
        yield session


@lru_cache()
def get_password_service() -> PasswordService:
    return PasswordService()


@lru_cache()
def get_token_service() -> TokenService:
    return TokenService()


async def get_auth_service(
        session: AsyncSession = Depends(get_database_session),
        password_service: PasswordService = Depends(get_password_service),
        token_service: TokenService = Depends(get_token_service),
) -> AuthenticationService:
    """
    Provide authentication service bound to the request's session.

    Args:
        session: Database session
        password_service: Password hashing service
        token_service: Token codec

    Returns:
        AuthenticationService: Authentication service instance
    """
    return AuthenticationService(
        SqlUserRepository(session),
        password_service,
        token_service,
    )


async def get_favorites_service(
        session: AsyncSession = Depends(get_database_session),
) -> FavoritesService:
    """
    Provide favorites service bound to the request's session.

    Args:
        session: Database session

    Returns:
        FavoritesService: Favorites service instance
    """
    return FavoritesService(SqlFavoriteRepository(session))


async def get_current_identity(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        auth_service: AuthenticationService = Depends(get_auth_service),
) -> Identity:
    """
    Resolve the bearer token on the request to an identity.

    A missing token is rejected with 401, a token that fails verification
    with 403, and a verified token whose user is gone with 401.

    Args:
        request: Incoming request, receives the identity on ``state``
        credentials: HTTP bearer token credentials, if sent
        auth_service: Authentication service

    Returns:
        Identity: Current authenticated user

    Raises:
        UnauthenticatedException: If no bearer token was sent
        TokenRejectedException: If the token is invalid or expired
        InvalidTokenException: If the token's user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedException()

    try:
        identity = await auth_service.resolve_identity(credentials.credentials)
    except TokenRejectedException as e:
        logger.warning("Rejected bearer token: %s", e.details)
        raise

    request.state.identity = identity
    return identity
