"""Favorites service scoped to the authenticated identity."""

import logging
from typing import List, Optional

from moviefav.core.auth.entities import Identity
from moviefav.core.exceptions import FieldError, ValidationException
from .entities import Favorite, FavoriteStatus, MovieSnapshot
from .exceptions import (
    AlreadyFavoritedException,
    FavoriteNotFoundException,
    MissingFieldsException,
)
from .interfaces import FavoriteRepositoryInterface

logger = logging.getLogger("moviefav.favorites")

MIN_RATING = 0
MAX_RATING = 10


def _stripped(value: Optional[str]) -> Optional[str]:
    return value.strip() if isinstance(value, str) else value


class FavoritesService:
    """
    CRUD, status and count operations over a user's favorite movies.

    Every operation takes the identity resolved by the access guard; the
    user id is never supplied by the caller.
    """

    def __init__(self, favorite_repository: FavoriteRepositoryInterface) -> None:
        """
        Initialize favorites service.

        Args:
            favorite_repository: Favorite data access interface
        """
        self._favorite_repository = favorite_repository

    async def list(self, identity: Identity) -> List[Favorite]:
        """Return the identity's favorites, most recently added first."""
        return await self._favorite_repository.list_for_user(identity.id)

    async def add(
        self,
        identity: Identity,
        movie_id: Optional[int],
        title: Optional[str],
        poster: Optional[str],
        overview: Optional[str],
        release_date: Optional[str],
        rating: Optional[float],
    ) -> Favorite:
        """
        Add a movie to the identity's favorites.

        Args:
            identity: Authenticated user
            movie_id: External movie identifier
            title: Movie title
            poster: Poster path, may be None
            overview: Plot summary
            release_date: Release date
            rating: Average rating, 0 is valid

        Returns:
            Created favorite

        Raises:
            MissingFieldsException: If any required field is absent or empty
            ValidationException: If the rating is outside 0-10
            AlreadyFavoritedException: If the movie is already a favorite
        """
        title, overview, release_date = (
            _stripped(value) for value in (title, overview, release_date)
        )
        if not movie_id or not title or not overview or not release_date or rating is None:
            raise MissingFieldsException()

        if not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationException(
                [FieldError("rating", f"Movie rating must be between {MIN_RATING} and {MAX_RATING}")]
            )

        # The unique constraint catches a concurrent insert that slips past this check
        existing = await self._favorite_repository.get(identity.id, movie_id)
        if existing:
            raise AlreadyFavoritedException(movie_id)

        favorite = await self._favorite_repository.add(
            identity.id,
            MovieSnapshot(
                movie_id=movie_id,
                title=title,
                poster=poster,
                overview=overview,
                release_date=release_date,
                rating=rating,
            ),
        )
        logger.info("User %s favorited movie %s", identity.id, movie_id)
        return favorite

    async def remove(self, identity: Identity, movie_id: int) -> int:
        """
        Remove a movie from the identity's favorites.

        Returns:
            The removed movie id

        Raises:
            FavoriteNotFoundException: If the movie is not a favorite
        """
        deleted = await self._favorite_repository.delete(identity.id, movie_id)
        if not deleted:
            raise FavoriteNotFoundException(movie_id)

        logger.info("User %s unfavorited movie %s", identity.id, movie_id)
        return movie_id

    async def check_status(self, identity: Identity, movie_id: int) -> FavoriteStatus:
        """Report whether a movie is currently a favorite."""
        favorite = await self._favorite_repository.get(identity.id, movie_id)
        if favorite is None:
            return FavoriteStatus(is_favorite=False, favorite_id=None)
        return FavoriteStatus(is_favorite=True, favorite_id=favorite.id)

    async def count(self, identity: Identity) -> int:
        return await self._favorite_repository.count_for_user(identity.id)
