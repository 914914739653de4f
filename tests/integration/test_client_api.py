"""Integration tests for the API client and favorites cache against the app."""

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from moviefav.client.api_client import ApiClientError, MovieAppClient
from moviefav.client.favorites_cache import FavoritesCache
from moviefav.client.models import Movie
from moviefav.infrastructure.database.session import create_tables
from tests.integration.test_app import create_test_app


@pytest_asyncio.fixture
async def api_client(tmp_path):
    """API client talking to the app in-process."""
    database_url = f"sqlite+aiosqlite:///{tmp_path / 'test_client.sqlite'}"
    app = create_test_app(database_url)

    # ASGITransport does not run the lifespan
    engine = create_async_engine(database_url, poolclass=NullPool)
    await create_tables(engine)
    await engine.dispose()

    transport = httpx.ASGITransport(app=app)
    async with MovieAppClient(base_url="http://testserver/api/v1", transport=transport) as client:
        yield client


@pytest.fixture
def dune_movie():
    return Movie(
        id=42,
        title="Dune",
        overview="Spice.",
        poster_path="/dune.jpg",
        release_date="2021-10-22",
        vote_average=8.0,
    )


class TestMovieAppClient:
    """Test the API client end to end."""

    @pytest.mark.asyncio
    async def test_register_and_profile(self, api_client):
        session = await api_client.register("Ann", "ann@example.com", "secret1")

        assert api_client.token == session.token
        profile = await api_client.get_profile()
        assert profile.id == session.user.id
        assert profile.email == "ann@example.com"
        assert profile.created_at is not None

    @pytest.mark.asyncio
    async def test_login_with_wrong_password(self, api_client):
        await api_client.register("Ann", "ann@example.com", "secret1")
        api_client.logout()

        with pytest.raises(ApiClientError) as exc_info:
            await api_client.login("ann@example.com", "wrong-password")

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid credentials"
        assert api_client.token is None

    @pytest.mark.asyncio
    async def test_validation_errors_are_exposed(self, api_client):
        with pytest.raises(ApiClientError) as exc_info:
            await api_client.register("A", "ann@example.com", "secret1")

        assert exc_info.value.status_code == 400
        assert exc_info.value.errors == [
            {"field": "name", "message": "Name must be at least 2 characters long"}
        ]

    @pytest.mark.asyncio
    async def test_favorites_roundtrip(self, api_client, dune_movie):
        await api_client.register("Ann", "ann@example.com", "secret1")

        favorite = await api_client.add_favorite(dune_movie)
        assert favorite.movie_id == 42
        assert favorite.poster == "/dune.jpg"
        assert favorite.rating == 8.0

        status = await api_client.check_favorite(42)
        assert status.is_favorite is True
        assert status.favorite_id == favorite.id
        assert await api_client.count_favorites() == 1

        assert await api_client.remove_favorite(42) == 42
        assert await api_client.list_favorites() == []


class TestFavoritesCacheAgainstApp:
    """Test the favorites cache against the real routes."""

    @pytest.mark.asyncio
    async def test_cache_lifecycle(self, api_client, dune_movie):
        await api_client.register("Ann", "ann@example.com", "secret1")

        async with FavoritesCache(api_client) as cache:
            assert cache.count == 0
            assert cache.error is None

            await cache.add(dune_movie)
            assert cache.is_favorite(42)
            assert cache.count == 1
            assert await cache.remote_count() == 1

            with pytest.raises(ApiClientError):
                await cache.add(dune_movie)
            assert cache.error == "Movie is already in favorites"
            assert cache.count == 1

            await cache.remove(42)
            assert not cache.is_favorite(42)
            assert cache.count == 0

        assert cache.favorites == []

    @pytest.mark.asyncio
    async def test_refresh_without_token(self, api_client):
        cache = FavoritesCache(api_client)

        await cache.refresh()

        assert cache.favorites == []
        assert cache.error == "No authentication token found"
        assert cache.loading is False
