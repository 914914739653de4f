"""Favorites domain entities."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MovieSnapshot:
    """
    Movie metadata copied into a favorite when it is created.

    Attributes:
        movie_id: External movie identifier
        title: Movie title
        poster: Poster path on the metadata service, if any
        overview: Plot summary
        release_date: Release date as reported by the metadata service
        rating: Average rating on a 0-10 scale
    """

    movie_id: int
    title: str
    overview: str
    release_date: str
    rating: float
    poster: Optional[str] = None


@dataclass(frozen=True)
class Favorite:
    """
    A user's favorite movie.

    Attributes:
        id: Unique favorite identifier
        user_id: Owning user
        movie_id: External movie identifier
        title: Snapshot title
        poster: Snapshot poster path
        overview: Snapshot overview
        release_date: Snapshot release date
        rating: Snapshot rating
        added_at: When the movie was favorited
    """

    id: int
    user_id: int
    movie_id: int
    title: str
    poster: Optional[str]
    overview: str
    release_date: str
    rating: float
    added_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.user_id <= 0:
            raise ValueError("User ID must be positive")
        if not self.movie_id:
            raise ValueError("Movie ID cannot be empty")


@dataclass(frozen=True)
class FavoriteStatus:
    """Whether a movie is in the user's favorites."""

    is_favorite: bool
    favorite_id: Optional[int] = None
