"""Client-side data models for the API and the movie metadata service."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model parsed from and dumped to camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class UserInfo(CamelModel):
    """Public user view returned by the API."""

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None


class AuthSession(BaseModel):
    """Token and user returned on registration or login."""

    token: str
    user: UserInfo


class FavoriteRecord(CamelModel):
    """A favorite as stored by the API."""

    id: int
    user_id: int
    movie_id: int
    title: str
    poster: Optional[str] = None
    overview: str
    release_date: str
    rating: float
    added_at: Optional[datetime] = None


class FavoriteStatusInfo(CamelModel):
    """Favorite status of one movie."""

    is_favorite: bool
    favorite_id: Optional[int] = None


class Movie(BaseModel):
    """Movie summary as returned by the metadata service."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str
    overview: str = ""
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: str = ""
    vote_average: float = 0.0
    vote_count: int = 0
    genre_ids: List[int] = Field(default_factory=list)
    adult: bool = False
    original_language: Optional[str] = None
    original_title: Optional[str] = None
    popularity: float = 0.0
    video: bool = False

    def to_favorite_payload(self) -> dict:
        """Snapshot sent to the API when the movie is favorited."""
        return {
            "movieId": self.id,
            "title": self.title,
            "poster": self.poster_path,
            "overview": self.overview,
            "releaseDate": self.release_date,
            "rating": self.vote_average,
        }


class Genre(BaseModel):
    id: int
    name: str


class MovieDetails(Movie):
    """Full movie record from the metadata service."""

    runtime: Optional[int] = None
    genres: List[Genre] = Field(default_factory=list)
    budget: int = 0
    revenue: int = 0
    status: Optional[str] = None
    tagline: Optional[str] = None
    homepage: Optional[str] = None


class MoviePage(BaseModel):
    """One page of movie results."""

    model_config = ConfigDict(extra="ignore")

    page: int = 1
    results: List[Movie] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0
