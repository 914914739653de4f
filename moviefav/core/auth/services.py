"""Authentication service implementations."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from moviefav.core.exceptions import ValidationException
from moviefav.settings import get_settings
from .entities import AuthResult, Identity, TokenPayload, User
from .exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    InvalidTokenException,
    TokenRejectedException,
)
from .interfaces import (
    PasswordServiceInterface,
    TokenServiceInterface,
    UserRepositoryInterface,
)
from .validation import normalize_email, validate_registration

logger = logging.getLogger("moviefav.auth")


class PasswordService(PasswordServiceInterface):
    """
    BCrypt-based password hashing service.

    Provides secure password hashing and verification using bcrypt algorithm
    with configurable rounds for performance vs security balance.
    """

    def __init__(self, rounds: Optional[int] = None) -> None:
        """
        Initialize password context with bcrypt.

        Args:
            rounds: Bcrypt cost factor, defaults to the configured value
        """
        if rounds is None:
            rounds = get_settings().bcrypt_rounds
        self._pwd_context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash_password(self, password: str) -> str:
        """
        Hash a password securely using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Hashed password string
        """
        return self._pwd_context.hash(password)

    def verify_password(self, password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Args:
            password: Plain text password
            hashed_password: Stored password hash

        Returns:
            True if password matches, False otherwise
        """
        try:
            return self._pwd_context.verify(password, hashed_password)
        except ValueError:
            # Unrecognized or corrupt hash
            return False


class TokenService(TokenServiceInterface):
    """
    JWT-based token service.

    Issues self-contained HS256 tokens carrying the subject id and email.
    Expiry is only enforced when a token is decoded.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expires_in: Optional[int] = None,
    ) -> None:
        """
        Initialize token service.

        Args:
            secret_key: Shared signing secret
            algorithm: JWT signing algorithm
            expires_in: Token lifetime in seconds
        """
        settings = get_settings()
        self._secret_key = secret_key or settings.jwt_secret_key
        self._algorithm = algorithm or settings.jwt_algorithm
        self._expires_in = expires_in if expires_in is not None else settings.jwt_expires_in

    @property
    def expires_in(self) -> int:
        return self._expires_in

    def create_access_token(self, user: User, issued_at: Optional[datetime] = None) -> str:
        """
        Create JWT access token for user.

        Args:
            user: User entity
            issued_at: Issue time, defaults to now

        Returns:
            JWT access token string
        """
        now = issued_at or datetime.now(timezone.utc)
        expire = now + timedelta(seconds=self._expires_in)

        payload = {
            "sub": str(user.id),
            "email": user.email,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

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
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])

            return TokenPayload(
                sub=payload["sub"],
                email=payload["email"],
                exp=payload["exp"],
                iat=payload["iat"],
            )

        except JWTError as e:
            raise TokenRejectedException(f"Token decode error: {e}")
        except (KeyError, TypeError, ValueError) as e:
            raise TokenRejectedException(f"Malformed token payload: {e}")


class AuthenticationService:
    """
    High-level authentication service orchestrating auth operations.

    Combines validation, password hashing, token issuance and user lookups
    for registration, login and bearer token resolution.
    """

    def __init__(
        self,
        user_repository: UserRepositoryInterface,
        password_service: PasswordServiceInterface,
        token_service: TokenServiceInterface,
    ) -> None:
        """
        Initialize authentication service.

        Args:
            user_repository: User data access interface
            password_service: Password hashing service
            token_service: Token management service
        """
        self._user_repository = user_repository
        self._password_service = password_service
        self._token_service = token_service

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        """
        Register new user account and issue a token.

        Args:
            name: Display name (2-50 characters)
            email: User email address
            password: Plain text password

        Returns:
            Token and public view of the created user

        Raises:
            ValidationException: If any field violates its constraints
            DuplicateEmailException: If the email is already registered
        """
        errors = validate_registration(name, email, password)
        if errors:
            raise ValidationException(errors)

        email = normalize_email(email)
        existing_user = await self._user_repository.get_user_by_email(email)
        if existing_user:
            raise DuplicateEmailException(email)

        hashed_password = self._password_service.hash_password(password)
        user = await self._user_repository.create_user(
            name=name.strip(),
            email=email,
            hashed_password=hashed_password,
        )
        logger.info("Registered user %s", user.id)

        token = self._token_service.create_access_token(user)
        return AuthResult(token=token, identity=user.to_identity())

    async def login(self, email: Optional[str], password: Optional[str]) -> AuthResult:
        """
        Authenticate user and issue a token.

        Args:
            email: User email address
            password: Plain text password

        Returns:
            Token and public view of the user

        Raises:
            InvalidCredentialsException: If the email is unknown or the password is wrong
        """
        user = await self._user_repository.get_user_by_email(normalize_email(email))

        if not user or not self._password_service.verify_password(
            password or "", user.hashed_password
        ):
            logger.info("Rejected login attempt")
            raise InvalidCredentialsException()

        token = self._token_service.create_access_token(user)
        return AuthResult(token=token, identity=user.to_identity())

    async def get_profile(self, identity: Identity) -> Identity:
        """Return the public view of an already resolved identity."""
        return identity

    async def resolve_identity(self, token: str) -> Identity:
        """
        Resolve a bearer token to the identity it was issued for.

        Args:
            token: JWT access token

        Returns:
            Identity of the token subject

        Raises:
            TokenRejectedException: If the token does not verify
            InvalidTokenException: If the subject no longer exists
        """
        payload = self._token_service.decode_token(token)

        try:
            user_id = int(payload.sub)
        except ValueError:
            raise TokenRejectedException(f"Non-numeric subject: {payload.sub}")

        user = await self._user_repository.get_user_by_id(user_id)
        if not user:
            raise InvalidTokenException(payload.sub)

        return user.to_identity()
