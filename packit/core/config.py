"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_enabled: Turn per-client rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        storage_backend: "memory" for the process-local store, "postgres" for SQL.
        database_url: Explicit async SQLAlchemy URL; overrides postgres_* values.
        weather_api_url: Root of an OpenWeatherMap-compatible API. When unset,
            temperatures are made up by the random weather adapter.
        weather_api_key: API key for the weather provider.
        weather_timeout_seconds: HTTP timeout for each weather request.
        weather_max_retries: Retries after a transient weather failure.
        weather_backoff_seconds: Delay before the first weather retry.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "PackIT"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    storage_backend: str = "memory"
    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "packit"

    weather_api_url: Optional[str] = None
    weather_api_key: Optional[str] = None
    weather_timeout_seconds: float = 5.0
    weather_max_retries: int = 3
    weather_backoff_seconds: float = 0.5

    def get_database_url(self) -> str:
        """Return the effective async database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build an asyncpg URL from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
