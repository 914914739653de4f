"""Client-side mirror of the signed-in user's favorites."""

import logging
from typing import List, Optional, Set

from .api_client import ApiClientError, MovieAppClient
from .models import FavoriteRecord, FavoriteStatusInfo, Movie

logger = logging.getLogger("moviefav.client.favorites")


class FavoritesCache:
    """
    Local copy of the user's favorites kept in step with the server.

    Mutations go to the server first and are applied locally only after the
    server accepts them. Use as an async context manager to load on entry
    and clear on exit.
    """

    def __init__(self, client: MovieAppClient) -> None:
        self._client = client
        self.favorites: List[FavoriteRecord] = []
        self.favorite_movie_ids: Set[int] = set()
        self.loading = False
        self.error: Optional[str] = None
        self._generation = 0
        self._refresh_generation = 0

    async def __aenter__(self) -> "FavoritesCache":
        await self.refresh()
        return self

    async def __aexit__(self, *exc_info) -> None:
        self.clear()

    @property
    def count(self) -> int:
        return len(self.favorites)

    def is_favorite(self, movie_id: int) -> bool:
        return movie_id in self.favorite_movie_ids

    def clear(self) -> None:
        # Invalidates any refresh still in flight.
        self._generation += 1
        self._refresh_generation = self._generation
        self.favorites = []
        self.favorite_movie_ids = set()
        self.loading = False
        self.error = None

    async def refresh(self) -> None:
        """Reload the full list from the server; failures are recorded in ``error``."""
        self._generation += 1
        generation = self._refresh_generation = self._generation
        self.loading = True
        self.error = None

        try:
            favorites = await self._client.list_favorites()
        except ApiClientError as e:
            if self._is_stale(generation):
                return
            logger.warning("Failed to load favorites: %s", e.message)
            self.favorites = []
            self.favorite_movie_ids = set()
            self.error = e.message
            self.loading = False
            return

        if self._is_stale(generation):
            return

        self.favorites = favorites
        self.favorite_movie_ids = {favorite.movie_id for favorite in favorites}
        self.loading = False

    def _is_stale(self, generation: int) -> bool:
        """Whether a refresh result was overtaken by a later refresh or mutation."""
        if generation == self._generation:
            return False
        if generation == self._refresh_generation:
            # Only a mutation came after; no other load is pending.
            self.loading = False
        return True

    async def add(self, movie: Movie) -> FavoriteRecord:
        """Add a movie on the server, then record it locally."""
        try:
            favorite = await self._client.add_favorite(movie)
        except ApiClientError as e:
            self.error = e.message
            raise

        self._generation += 1
        self.favorites = [favorite] + self.favorites
        self.favorite_movie_ids = self.favorite_movie_ids | {favorite.movie_id}
        self.error = None
        return favorite

    async def remove(self, movie_id: int) -> None:
        """Remove a movie on the server, then drop it locally."""
        try:
            await self._client.remove_favorite(movie_id)
        except ApiClientError as e:
            self.error = e.message
            raise

        self._generation += 1
        self.favorites = [f for f in self.favorites if f.movie_id != movie_id]
        self.favorite_movie_ids = self.favorite_movie_ids - {movie_id}
        self.error = None

    async def check_status(self, movie_id: int) -> FavoriteStatusInfo:
        return await self._client.check_favorite(movie_id)

    async def remote_count(self) -> int:
        return await self._client.count_favorites()
