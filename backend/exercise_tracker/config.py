"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection string and listening port come from the environment (or .env)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - APP_PORT keeps the variable name the service has always been deployed with
    - SQLite file database by default: works out-of-the-box without a server
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./exercise_tracker.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 5

    # Server
    app_host: str = "0.0.0.0"
    app_port: int = 3000

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
