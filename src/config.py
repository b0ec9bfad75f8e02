"""Application configuration via Pydantic BaseSettings."""

from enum import Enum
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    development = "development"
    staging = "staging"
    production = "production"


class Settings(BaseSettings):
    """Settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Environment
    ENVIRONMENT: Environment = Environment.development

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS (comma separated)
    CORS_ALLOWED_ORIGINS: str = "*"

    # Points shown in API responses are rounded to this many decimals
    POINTS_DISPLAY_DECIMALS: int = 2

    # Leaderboard
    RANKINGS_DEFAULT_LIMIT: int = 10
    RANKINGS_MAX_LIMIT: int = 100

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ALLOWED_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
