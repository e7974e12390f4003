"""Store settings using pydantic-settings."""

import logging
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Store configuration - single source of truth.

    All settings loaded from environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.database_url)
    """

    # Database
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="postgres")
    db_name: str = Field(default="users_db")
    db_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy async URL. Takes precedence over the "
        "db_host/db_port/... parts, e.g. sqlite+aiosqlite:///./users.db",
    )
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=10, ge=0)
    db_pool_pre_ping: bool = Field(default=True)

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    app_name: str = Field(default="user-store")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"LOG_LEVEL must be a standard logging level, got {v!r}")
        return level

    @property
    def database_url(self) -> str:
        """Async database URL: the explicit override, else PostgreSQL via asyncpg."""
        if self.db_url:
            return self.db_url
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "dev"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the process lifetime.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
