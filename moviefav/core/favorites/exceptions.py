"""Favorites exceptions."""

from moviefav.core.exceptions import DomainException


class FavoritesException(DomainException):
    """Base exception for favorites errors."""
    pass


class MissingFieldsException(FavoritesException):
    """Raised when required movie information is absent."""

    def __init__(self) -> None:
        super().__init__("Missing required movie information")


class AlreadyFavoritedException(FavoritesException):
    """Raised when the user has already favorited the movie."""

    status_code = 409

    def __init__(self, movie_id: int) -> None:
        super().__init__("Movie is already in favorites", f"Movie ID: {movie_id}")
        self.movie_id = movie_id


class FavoriteNotFoundException(FavoritesException):
    """Raised when removing a movie that is not in the user's favorites."""

    status_code = 404

    def __init__(self, movie_id: int) -> None:
        super().__init__("Movie not found in favorites", f"Movie ID: {movie_id}")
        self.movie_id = movie_id
