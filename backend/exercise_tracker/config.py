"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables (never hardcoded beyond dev defaults)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with docker-compose
"""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from exercise_tracker.core.domain_types import LogLimitMode

BACKEND_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://exercise:exercise@db:5432/exercise_tracker"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Logs endpoint: how `limit` truncates the filtered log
    log_limit_mode: LogLimitMode = LogLimitMode.SKIP

    # API
    cors_origins: list[str] = ["*"]
    static_dir: str = "static"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def static_path(self) -> str:
        """Relative static_dir is taken from the backend/ directory, not the cwd."""
        if os.path.isabs(self.static_dir):
            return self.static_dir
        return os.path.join(BACKEND_DIR, self.static_dir)


@lru_cache
def get_settings() -> Settings:
    return Settings()
