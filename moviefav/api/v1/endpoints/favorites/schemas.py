"""Favorites API schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AddFavoriteRequest(CamelModel):
    """Add favorite request schema.

    Every field is optional at the schema level; missing movie information
    is reported by the favorites service.
    """

    movie_id: Optional[int] = Field(None, description="External movie ID", examples=[42])
    title: Optional[str] = Field(None, description="Movie title", examples=["Dune"])
    poster: Optional[str] = Field(
        None, description="Poster path", examples=["/d5NXSklXo0qyIYkgV94XAgMIckC.jpg"]
    )
    overview: Optional[str] = Field(
        None, description="Plot summary", examples=["Paul Atreides leads nomadic tribes..."]
    )
    release_date: Optional[str] = Field(None, description="Release date", examples=["2021-10-22"])
    rating: Optional[float] = Field(None, description="Average rating (0-10)", examples=[8.0])


class FavoriteResponse(CamelModel):
    """Favorite movie response schema."""

    id: int = Field(..., description="Favorite unique identifier", examples=[1])
    user_id: int = Field(..., description="Owning user", examples=[1])
    movie_id: int = Field(..., description="External movie ID", examples=[42])
    title: str = Field(..., description="Movie title", examples=["Dune"])
    poster: Optional[str] = Field(None, description="Poster path")
    overview: str = Field(..., description="Plot summary")
    release_date: str = Field(..., description="Release date", examples=["2021-10-22"])
    rating: float = Field(..., description="Average rating (0-10)", examples=[8.0])
    added_at: Optional[datetime] = Field(None, description="When the movie was favorited")


class RemovedFavoriteResponse(CamelModel):
    """Removed favorite response schema."""

    movie_id: int = Field(..., description="Movie removed from favorites", examples=[42])


class FavoriteStatusResponse(CamelModel):
    """Favorite status response schema."""

    is_favorite: bool = Field(..., description="Whether the movie is a favorite")
    favorite_id: Optional[int] = Field(None, description="Favorite ID when it is one")


class FavoritesCountResponse(CamelModel):
    """Favorites count response schema."""

    count: int = Field(..., description="Number of favorites", examples=[3])
