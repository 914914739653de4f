"""Read-only client for the TMDB v3 movie metadata service."""

import logging
from typing import Any, Dict, Optional

import httpx

from moviefav.settings import get_settings
from .models import MovieDetails, MoviePage

logger = logging.getLogger("moviefav.client.movies")

POSTER_PLACEHOLDER = "https://via.placeholder.com/500x750?text=No+Image"
BACKDROP_PLACEHOLDER = "https://via.placeholder.com/1280x720?text=No+Image"


class MovieApiError(Exception):
    """Raised when the metadata service returns an error or is unreachable."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MovieApiClient:
    """Async client for browsing, searching and looking up movies."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        image_base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        settings = get_settings()
        self.api_key = api_key if api_key is not None else settings.tmdb_api_key
        self.image_base_url = (image_base_url or settings.tmdb_image_base_url).rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.tmdb_base_url,
            timeout=timeout if timeout is not None else settings.client_timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "MovieApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def get_popular(self, page: int = 1) -> MoviePage:
        return MoviePage.model_validate(await self._get("/movie/popular", page=page))

    async def get_top_rated(self, page: int = 1) -> MoviePage:
        return MoviePage.model_validate(await self._get("/movie/top_rated", page=page))

    async def get_now_playing(self, page: int = 1) -> MoviePage:
        return MoviePage.model_validate(await self._get("/movie/now_playing", page=page))

    async def discover(
        self,
        page: int = 1,
        sort_by: str = "popularity.desc",
        year: Optional[int] = None,
        with_genres: Optional[str] = None,
    ) -> MoviePage:
        """
        Discover movies with optional filters.

        Args:
            page: Result page
            sort_by: TMDB sort key
            year: Primary release year
            with_genres: Comma separated genre ids
        """
        params: Dict[str, Any] = {"page": page, "sort_by": sort_by}
        if year:
            params["year"] = year
        if with_genres:
            params["with_genres"] = with_genres
        return MoviePage.model_validate(await self._get("/discover/movie", **params))

    async def search(self, query: str, page: int = 1) -> MoviePage:
        """Search movies by title; a blank query returns popular movies."""
        if not query or not query.strip():
            return await self.get_popular(page)
        data = await self._get("/search/movie", query=query.strip(), page=page)
        return MoviePage.model_validate(data)

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        return MovieDetails.model_validate(await self._get(f"/movie/{movie_id}"))

    async def get_recommendations(self, movie_id: int, page: int = 1) -> MoviePage:
        data = await self._get(f"/movie/{movie_id}/recommendations", page=page)
        return MoviePage.model_validate(data)

    async def get_similar(self, movie_id: int, page: int = 1) -> MoviePage:
        data = await self._get(f"/movie/{movie_id}/similar", page=page)
        return MoviePage.model_validate(data)

    def poster_url(self, path: Optional[str], size: str = "w500") -> str:
        if not path:
            return POSTER_PLACEHOLDER
        return f"{self.image_base_url}/{size}{path}"

    def backdrop_url(self, path: Optional[str], size: str = "w1280") -> str:
        if not path:
            return BACKDROP_PLACEHOLDER
        return f"{self.image_base_url}/{size}{path}"

    async def _get(self, path: str, **params: Any) -> Dict[str, Any]:
        params["api_key"] = self.api_key

        try:
            response = await self._http.get(path, params=params)
        except httpx.HTTPError as e:
            logger.warning("Movie API request %s failed: %s", path, e)
            raise MovieApiError(f"Network error: {e}") from e

        if not response.is_success:
            raise MovieApiError(
                f"API Error: {response.status_code} {response.reason_phrase}",
                response.status_code,
            )

        return response.json()
