"""
Application settings.

Settings nests the database and client groups and adds the API server
options.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from therapy_dashboard.configs.base import BaseSettings
from therapy_dashboard.configs.client import ClientSettings
from therapy_dashboard.configs.database import DatabaseSettings


class Settings(BaseSettings):
    """Everything the API process and the dashboard client read from the environment."""

    api_host: str = "0.0.0.0"
    api_port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(
        default=["*"],
        description="Origins allowed to call the API from a browser (JSON list in env)",
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings instance; the environment is read once per process.

    Usage:
        from therapy_dashboard.configs import get_settings
        settings = get_settings()
    """
    return Settings()
