"""Favorites repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from .entities import Favorite, MovieSnapshot


class FavoriteRepositoryInterface(ABC):
    """
    Abstract interface for favorite persistence.

    Every operation is keyed by the owning user id; the pair
    (user_id, movie_id) is unique.
    """

    @abstractmethod
    async def list_for_user(self, user_id: int) -> List[Favorite]:
        """
        List a user's favorites, most recently added first.

        Args:
            user_id: Owning user

        Returns:
            Favorites ordered by added_at descending
        """
        pass

    @abstractmethod
    async def get(self, user_id: int, movie_id: int) -> Optional[Favorite]:
        """
        Get the favorite for a (user, movie) pair.

        Args:
            user_id: Owning user
            movie_id: External movie identifier

        Returns:
            Favorite if present, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user_id: int, movie: MovieSnapshot) -> Favorite:
        """
        Insert a favorite.

        Args:
            user_id: Owning user
            movie: Movie metadata snapshot

        Returns:
            Created favorite

        Raises:
            AlreadyFavoritedException: If the pair already exists
        """
        pass

    @abstractmethod
    async def delete(self, user_id: int, movie_id: int) -> bool:
        """
        Delete the favorite for a (user, movie) pair.

        Args:
            user_id: Owning user
            movie_id: External movie identifier

        Returns:
            True if a favorite was deleted, False if none matched
        """
        pass

    @abstractmethod
    async def count_for_user(self, user_id: int) -> int:
        """
        Count a user's favorites.

        Args:
            user_id: Owning user

        Returns:
            Number of favorites
        """
        pass
