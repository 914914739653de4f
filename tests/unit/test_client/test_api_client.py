"""Tests for the MovieFav API client."""

import json

import httpx
import pytest

from moviefav.client.api_client import ApiClientError, MovieAppClient
from moviefav.client.models import Movie

BASE_URL = "http://api.test/api/v1"


def _envelope(data=None, message="OK", success=True, errors=None):
    return {"success": success, "message": message, "data": data, "errors": errors}


def _client(handler, token=None) -> MovieAppClient:
    return MovieAppClient(base_url=BASE_URL, token=token, transport=httpx.MockTransport(handler))


AUTH_DATA = {"token": "jwt-token", "user": {"id": 1, "name": "Ann", "email": "ann@example.com"}}


class TestMovieAppClient:
    """Test cases for MovieAppClient."""

    @pytest.mark.asyncio
    async def test_login_stores_token(self):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=_envelope(AUTH_DATA, "Login successful"))

        async with _client(handler) as client:
            session = await client.login("ann@example.com", "secret1")

            assert session.token == "jwt-token"
            assert session.user.name == "Ann"
            assert client.token == "jwt-token"
            assert client.is_authenticated

        assert requests[0].url.path == "/api/v1/auth/login"
        assert "Authorization" not in requests[0].headers
        assert json.loads(requests[0].content) == {
            "email": "ann@example.com",
            "password": "secret1",
        }

    @pytest.mark.asyncio
    async def test_register_stores_token(self):
        def handler(request):
            return httpx.Response(201, json=_envelope(AUTH_DATA, "User created successfully"))

        async with _client(handler) as client:
            await client.register("Ann", "ann@example.com", "secret1")

            assert client.token == "jwt-token"

    @pytest.mark.asyncio
    async def test_bearer_header_attached(self):
        seen = {}

        def handler(request):
            seen["authorization"] = request.headers.get("Authorization")
            return httpx.Response(200, json=_envelope({"count": 2}))

        async with _client(handler, token="abc") as client:
            assert await client.count_favorites() == 2

        assert seen["authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_missing_token(self):
        """Test authenticated calls fail locally without a token."""

        def handler(request):
            raise AssertionError("no request expected")

        async with _client(handler) as client:
            with pytest.raises(ApiClientError, match="No authentication token found"):
                await client.list_favorites()

    @pytest.mark.asyncio
    async def test_add_favorite_payload(self):
        """Test a movie is sent as a camelCase snapshot."""
        captured = {}

        def handler(request):
            captured["body"] = json.loads(request.content)
            return httpx.Response(
                201,
                json=_envelope(
                    {
                        "id": 3,
                        "userId": 1,
                        "movieId": 42,
                        "title": "Dune",
                        "poster": "/dune.jpg",
                        "overview": "Spice.",
                        "releaseDate": "2021-10-22",
                        "rating": 8.0,
                        "addedAt": "2024-01-01T12:00:00",
                    }
                ),
            )

        movie = Movie(
            id=42,
            title="Dune",
            overview="Spice.",
            poster_path="/dune.jpg",
            release_date="2021-10-22",
            vote_average=8.0,
        )

        async with _client(handler, token="abc") as client:
            favorite = await client.add_favorite(movie)

        assert captured["body"] == {
            "movieId": 42,
            "title": "Dune",
            "poster": "/dune.jpg",
            "overview": "Spice.",
            "releaseDate": "2021-10-22",
            "rating": 8.0,
        }
        assert favorite.id == 3
        assert favorite.user_id == 1

    @pytest.mark.asyncio
    async def test_error_envelope(self):
        """Test a failure envelope becomes an ApiClientError."""

        def handler(request):
            return httpx.Response(
                400,
                json=_envelope(
                    message="Please provide a valid email address",
                    success=False,
                    errors=[{"field": "email", "message": "Please provide a valid email address"}],
                ),
            )

        async with _client(handler) as client:
            with pytest.raises(ApiClientError) as exc_info:
                await client.register("Ann", "bad", "secret1")

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Please provide a valid email address"
        assert exc_info.value.errors[0]["field"] == "email"
        assert client.token is None

    @pytest.mark.asyncio
    async def test_unsuccessful_envelope_with_ok_status(self):
        def handler(request):
            return httpx.Response(200, json=_envelope(success=False, message="Nope"))

        async with _client(handler, token="abc") as client:
            with pytest.raises(ApiClientError, match="Nope"):
                await client.list_favorites()

    @pytest.mark.asyncio
    async def test_non_json_response(self):
        def handler(request):
            return httpx.Response(502, text="Bad Gateway")

        async with _client(handler, token="abc") as client:
            with pytest.raises(ApiClientError) as exc_info:
                await client.list_favorites()

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler, token="abc") as client:
            with pytest.raises(ApiClientError, match="Network error"):
                await client.list_favorites()

    @pytest.mark.asyncio
    async def test_remove_and_check(self):
        def handler(request):
            if request.method == "DELETE":
                return httpx.Response(200, json=_envelope({"movieId": 42}))
            return httpx.Response(200, json=_envelope({"isFavorite": False, "favoriteId": None}))

        async with _client(handler, token="abc") as client:
            assert await client.remove_favorite(42) == 42
            status = await client.check_favorite(42)

        assert status.is_favorite is False
        assert status.favorite_id is None

    @pytest.mark.asyncio
    async def test_logout_clears_token(self):
        async with _client(lambda request: httpx.Response(200), token="abc") as client:
            client.logout()

            assert client.token is None
