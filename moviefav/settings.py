"""Application settings and configuration."""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables.
    Example: DATABASE_URL, JWT_SECRET_KEY, TMDB_API_KEY
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    debug: bool = Field(False)
    environment: str = Field("development")
    host: str = Field("0.0.0.0")
    port: int = Field(8000)
    api_v1_prefix: str = Field("/api/v1")

    # API settings
    api_title: str = Field("MovieFav API")
    api_version: str = Field("1.0.0")
    api_description: str = Field("Movie favorites service with JWT authentication")

    database_url: str = Field(
        default="sqlite+aiosqlite:///./moviefav.db",
        description="Database connection URL",
    )

    # JWT settings
    jwt_secret_key: str = Field("your-secret-key-change-in-production")
    jwt_algorithm: str = Field("HS256")
    jwt_expires_in: int = Field(
        default=604800,
        description="Access token lifetime in seconds (7 days)",
    )

    # Security settings
    bcrypt_rounds: int = Field(12)

    # CORS settings
    allowed_origins: List[str] = Field(
        default=["http://localhost:3000"],
        description="CORS allowed origins",
    )

    # Logging settings
    log_level: str = Field("INFO")
    log_format: str = Field(
        default="json",
        description="Log format (json or text)",
    )
    log_dir: str = Field("logs")

    # Movie metadata service
    tmdb_api_key: str = Field("")
    tmdb_base_url: str = Field("https://api.themoviedb.org/3")
    tmdb_image_base_url: str = Field("https://image.tmdb.org/t/p")

    # Client defaults
    api_base_url: str = Field("http://localhost:8000/api/v1")
    client_timeout: float = Field(10.0)

    @property
    def database_is_sqlite(self) -> bool:
        """Check if using SQLite database."""
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    return Settings()
