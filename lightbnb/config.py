"""
Configuration management using Pydantic settings.
Handles the store connection URL and pool settings from environment variables.
"""

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings
from typing import Optional
from functools import lru_cache


DEFAULT_ASYNC_DRIVER = "postgresql+asyncpg://"
SUPPORTED_URL_PREFIXES = ("postgresql+asyncpg://", "sqlite+aiosqlite://")


class Settings(BaseSettings):
    """Store settings with environment variable support."""

    # Application configuration
    app_name: str = "LightBnB"
    environment: str = "development"

    # Database configuration - built from components when not given directly
    database_url: Optional[str] = None

    postgres_db: str = "lightbnb"
    postgres_user: str = "vagrant"
    postgres_password: str = "123"
    postgres_host: str = "localhost"
    postgres_port: int = 5432

    # Pool configuration
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_echo: bool = False

    # Row limit applied when callers do not pass one
    default_result_limit: int = 10

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment setting."""
        allowed_envs = ["development", "testing", "staging", "production"]
        if v not in allowed_envs:
            raise ValueError(f"Environment must be one of: {allowed_envs}")
        return v

    @field_validator("default_result_limit", "db_pool_size")
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("Value must be a positive integer")
        return v

    @model_validator(mode="after")
    def build_database_url(self):
        """Build database URL from components if not provided directly."""
        if not self.database_url:
            self.database_url = (
                f"{DEFAULT_ASYNC_DRIVER}{self.postgres_user}:{self.postgres_password}"
                f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
            )
            return self

        # Ensure async driver is used
        if self.database_url.startswith("postgresql://"):
            self.database_url = self.database_url.replace("postgresql://", DEFAULT_ASYNC_DRIVER, 1)
        elif self.database_url.startswith("postgres://"):
            self.database_url = self.database_url.replace("postgres://", DEFAULT_ASYNC_DRIVER, 1)

        if not self.database_url.startswith(SUPPORTED_URL_PREFIXES):
            raise ValueError(f"Database URL must use one of: {', '.join(SUPPORTED_URL_PREFIXES)}")
        return self

    @property
    def is_sqlite(self) -> bool:
        """Check if the store is an SQLite database (used for tests)."""
        return self.database_url.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance for the process entry point.
    Components receive their settings explicitly; this is only a convenience.
    """
    return Settings()
