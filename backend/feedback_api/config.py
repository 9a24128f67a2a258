"""Configuration settings"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy import URL, make_url

# Settings priority:
#
# - Arguments passed when instantiating Settings(...)
# - Environment variables from the OS
# - .env file (if configured via SettingsConfigDict(env_file=...))
# - Default values in this class


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file="../.env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Feedback Management System"
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Root log level (DEBUG/INFO/WARNING/ERROR)",
    )

    # OS settings
    DTAP: str = Field(
        default="DEV",
        description="DTAP environment (DEV/tests/ACC/PROD)",
    )
    IMAGE_TAG: str = Field(
        default="undefined",
        description="Image tag from container build",
    )

    # Server settings
    HOST: str = Field(default="0.0.0.0", description="Interface to bind to")
    PORT: int = Field(default=8080, description="Port to listen on")
    BACKEND_BASE_URL: str = Field(
        default="http://localhost:8080",
        description="Public base URL of the API (used in startup messages)",
    )

    # Database settings
    DATABASE_URL: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the POSTGRES_* settings when set",
    )
    POSTGRES_HOST: str = Field(
        default="localhost",
        description="PostgreSQL server",
    )
    POSTGRES_PORT: int = Field(default=5432, description="Database port")
    POSTGRES_DB_NAME: str = Field(default="feedback", description="Database name")

    # Database credentials
    POSTGRES_DB_USER: str = Field(
        default="undefined", description="Database application user"
    )
    POSTGRES_DB_PASSWORD: str = Field(
        default="undefined", description="Database application password"
    )

    @property
    def database_url(self) -> URL:
        """Database URL for the async engine.

        Uses DATABASE_URL verbatim when configured, otherwise builds a
        postgres (asyncpg) URL from the POSTGRES_* settings.
        """
        if self.DATABASE_URL:
            return make_url(self.DATABASE_URL)

        # URL.create escapes special characters in passwords (/, =, @, etc.)
        return URL.create(
            "postgresql+asyncpg",
            database=self.POSTGRES_DB_NAME,
            host=self.POSTGRES_HOST,
            password=self.POSTGRES_DB_PASSWORD,
            port=self.POSTGRES_PORT,
            username=self.POSTGRES_DB_USER,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
