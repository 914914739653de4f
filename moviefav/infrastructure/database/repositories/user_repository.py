"""User repository implementation."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from moviefav.core.auth.entities import User
from moviefav.core.auth.exceptions import DuplicateEmailException
from moviefav.core.auth.interfaces import UserRepositoryInterface
from moviefav.core.services.auth.models import UserModel


class SqlUserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        """
        Initialize user repository.

        Args:
            session: Database session
        """
        self._session = session

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity if found, None otherwise
        """
        result = await self._session.execute(
            select(UserModel).where(UserModel.id == user_id)
        )
        user_model = result.scalar_one_or_none()

        if user_model:
            return self._model_to_entity(user_model)
        return None

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: Normalized email address

        Returns:
            User entity if found, None otherwise
        """
        result = await self._session.execute(
            select(UserModel).where(UserModel.email == email)
        )
        user_model = result.scalar_one_or_none()

        if user_model:
            return self._model_to_entity(user_model)
        return None

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
            DuplicateEmailException: If the email already exists
        """
        user_model = UserModel(
            name=name,
            email=email,
            hashed_password=hashed_password,
        )

        try:
            self._session.add(user_model)
            await self._session.flush()
            await self._session.refresh(user_model)
            return self._model_to_entity(user_model)
        except IntegrityError:
            await self._session.rollback()
            raise DuplicateEmailException(email)

    def _model_to_entity(self, model: UserModel) -> User:
        """
        Convert database model to domain entity.

        Args:
            model: User database model

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            hashed_password=model.hashed_password,
            created_at=model.created_at,
        )
