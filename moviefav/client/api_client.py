"""HTTP client for the MovieFav API."""

import logging
from typing import Any, List, Optional

import httpx

from moviefav.settings import get_settings
from .models import AuthSession, FavoriteRecord, FavoriteStatusInfo, Movie, UserInfo

logger = logging.getLogger("moviefav.client")


class ApiClientError(Exception):
    """Raised when an API call fails or returns an unsuccessful envelope."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        errors: Optional[List[dict]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors or []


class MovieAppClient:
    """
    Async client for the authentication and favorites API.

    Holds the bearer token issued on login or registration and attaches it
    to every authenticated request. Responses are unwrapped from the
    ``{success, message, data, errors}`` envelope.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize API client.

        Args:
            base_url: API root including the version prefix
            token: Previously issued bearer token
            timeout: Request timeout in seconds
            transport: Custom httpx transport
        """
        settings = get_settings()
        self._token = token
        self._http = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.client_timeout,
            headers={"Content-Type": "application/json"},
            transport=transport,
        )

    @property
    def token(self) -> Optional[str]:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    async def __aenter__(self) -> "MovieAppClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def register(self, name: str, email: str, password: str) -> AuthSession:
        """Register an account and keep the issued token."""
        data = await self._request(
            "POST",
            "/auth/register",
            auth=False,
            json={"name": name, "email": email, "password": password},
        )
        session = AuthSession.model_validate(data)
        self._token = session.token
        return session

    async def login(self, email: str, password: str) -> AuthSession:
        """Log in and keep the issued token."""
        data = await self._request(
            "POST",
            "/auth/login",
            auth=False,
            json={"email": email, "password": password},
        )
        session = AuthSession.model_validate(data)
        self._token = session.token
        return session

    def logout(self) -> None:
        self._token = None

    async def get_profile(self) -> UserInfo:
        data = await self._request("GET", "/auth/profile")
        return UserInfo.model_validate(data)

    async def list_favorites(self) -> List[FavoriteRecord]:
        data = await self._request("GET", "/favorites")
        return [FavoriteRecord.model_validate(item) for item in data or []]

    async def add_favorite(self, movie: Movie) -> FavoriteRecord:
        data = await self._request("POST", "/favorites", json=movie.to_favorite_payload())
        return FavoriteRecord.model_validate(data)

    async def remove_favorite(self, movie_id: int) -> int:
        data = await self._request("DELETE", f"/favorites/{movie_id}")
        return data["movieId"]

    async def check_favorite(self, movie_id: int) -> FavoriteStatusInfo:
        data = await self._request("GET", f"/favorites/check/{movie_id}")
        return FavoriteStatusInfo.model_validate(data)

    async def count_favorites(self) -> int:
        data = await self._request("GET", "/favorites/count")
        return data["count"]

    async def _request(self, method: str, path: str, auth: bool = True, **kwargs) -> Any:
        """
        Send a request and unwrap the response envelope.

        Args:
            method: HTTP method
            path: Path relative to the API root
            auth: Whether to attach the bearer token
            **kwargs: Passed through to httpx

        Returns:
            The envelope's ``data`` payload

        Raises:
            ApiClientError: On missing token, transport failure or unsuccessful response
        """
        headers = kwargs.pop("headers", {})
        if auth:
            if not self._token:
                raise ApiClientError("No authentication token found")
            headers["Authorization"] = f"Bearer {self._token}"

        try:
            response = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("API request %s %s failed: %s", method, path, e)
            raise ApiClientError(f"Network error: {e}") from e

        try:
            body = response.json()
        except ValueError:
            raise ApiClientError("Invalid response from server", response.status_code)

        if not response.is_success or not body.get("success", False):
            raise ApiClientError(
                body.get("message") or "API request failed",
                response.status_code,
                body.get("errors"),
            )

        return body.get("data")
