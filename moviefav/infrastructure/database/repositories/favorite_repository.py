"""Favorite repository implementation."""

from typing import List, Optional

from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from moviefav.core.favorites.entities import Favorite, MovieSnapshot
from moviefav.core.favorites.exceptions import AlreadyFavoritedException
from moviefav.core.favorites.interfaces import FavoriteRepositoryInterface
from moviefav.core.services.favorites.models import FavoriteModel


class SqlFavoriteRepository(FavoriteRepositoryInterface):
    """SQLAlchemy implementation of favorite repository."""

    def __init__(self, session: AsyncSession):
        """
        Initialize favorite repository.

        Args:
            session: Database session
        """
        self._session = session

    async def list_for_user(self, user_id: int) -> List[Favorite]:
        """
        List a user's favorites, most recently added first.

        Args:
            user_id: Owning user

        Returns:
            List of Favorite entities
        """
        result = await self._session.execute(
            select(FavoriteModel)
            .where(FavoriteModel.user_id == user_id)
            .order_by(FavoriteModel.added_at.desc(), FavoriteModel.id.desc())
        )
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def get(self, user_id: int, movie_id: int) -> Optional[Favorite]:
        """
        Get the favorite for a (user, movie) pair.

        Args:
            user_id: Owning user
            movie_id: External movie identifier

        Returns:
            Favorite entity if found, None otherwise
        """
        favorite_model = await self._get_model(user_id, movie_id)

        if favorite_model:
            return self._model_to_entity(favorite_model)
        return None

    async def add(self, user_id: int, movie: MovieSnapshot) -> Favorite:
        """
        Insert a favorite.

        Args:
            user_id: Owning user
            movie: Movie metadata snapshot

        Returns:
            Created Favorite entity

        Raises:
            AlreadyFavoritedException: If the (user, movie) pair already exists
        """
        favorite_model = FavoriteModel(
            user_id=user_id,
            movie_id=movie.movie_id,
            title=movie.title,
            poster=movie.poster,
            overview=movie.overview,
            release_date=movie.release_date,
            rating=movie.rating,
        )

        try:
            self._session.add(favorite_model)
            await self._session.flush()
            await self._session.refresh(favorite_model)
            return self._model_to_entity(favorite_model)
        except IntegrityError:
            await self._session.rollback()
            raise AlreadyFavoritedException(movie.movie_id)

    async def delete(self, user_id: int, movie_id: int) -> bool:
        """
        Delete the favorite for a (user, movie) pair.

        Args:
            user_id: Owning user
            movie_id: External movie identifier

        Returns:
            True if a favorite was deleted, False if not found
        """
        favorite_model = await self._get_model(user_id, movie_id)

        if favorite_model:
            await self._session.delete(favorite_model)
            await self._session.flush()
            return True
        return False

    async def count_for_user(self, user_id: int) -> int:
        """
        Count a user's favorites.

        Args:
            user_id: Owning user

        Returns:
            Number of favorites
        """
        result = await self._session.execute(
            select(func.count(FavoriteModel.id)).where(FavoriteModel.user_id == user_id)
        )
        return result.scalar_one()

    async def _get_model(self, user_id: int, movie_id: int) -> Optional[FavoriteModel]:
        result = await self._session.execute(
            select(FavoriteModel).where(
                and_(
                    FavoriteModel.user_id == user_id,
                    FavoriteModel.movie_id == movie_id,
                )
            )
        )
        return result.scalar_one_or_none()

    def _model_to_entity(self, model: FavoriteModel) -> Favorite:
        """
        Convert database model to domain entity.

        Args:
            model: Favorite database model

        Returns:
            Favorite domain entity
        """
        return Favorite(
            id=model.id,
            user_id=model.user_id,
            movie_id=model.movie_id,
            title=model.title,
            poster=model.poster,
            overview=model.overview,
            release_date=model.release_date,
            rating=model.rating,
            added_at=model.added_at,
        )
