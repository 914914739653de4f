"""Favorites service database models."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from moviefav.infrastructure.database.connection import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FavoriteModel(Base):
    """
    Database model for favorite movies.

    Each row carries a snapshot of the movie metadata taken when the movie
    was favorited. A user can favorite a given movie at most once.
    """

    __tablename__ = "favorites"
    __table_args__ = (
        UniqueConstraint("user_id", "movie_id"),
    )

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Unique favorite identifier"
    )

    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        doc="ID of the user who favorited the movie"
    )

    movie_id: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        index=True,
        doc="External movie identifier"
    )

    title: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        doc="Movie title snapshot"
    )

    poster: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        doc="Poster path snapshot"
    )

    overview: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        doc="Movie overview snapshot"
    )

    release_date: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        doc="Release date snapshot"
    )

    rating: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        doc="Average rating snapshot (0-10)"
    )

    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        index=True,
        doc="When the movie was favorited"
    )

    def __repr__(self) -> str:
        """String representation of favorite model."""
        return f"<FavoriteModel(id={self.id}, user_id={self.user_id}, movie_id={self.movie_id})>"
