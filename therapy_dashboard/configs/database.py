"""
Database configuration settings.

Reads the single DATABASE_URL connection string and the pool tuning knobs
used when building the async SQLAlchemy engine.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from therapy_dashboard.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Relational database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./therapy_dashboard.db",
        description="Database connection string (DATABASE_URL)",
    )

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def is_sqlite(self) -> bool:
        """True when the configured backend is SQLite."""
        return self.async_database_url.startswith("sqlite")

    @property
    def async_database_url(self) -> str:
        """
        Construct async SQLAlchemy connection URL.

        Hosted Postgres providers hand out plain ``postgres://`` or
        ``postgresql://`` strings; those are rewritten to the asyncpg driver.

        Returns:
            str: SQLAlchemy async-compatible database URL
        """
        url = self.url
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        if url.startswith("postgresql://"):
            url = "postgresql+asyncpg://" + url[len("postgresql://"):]
        if url.startswith("sqlite://"):
            url = "sqlite+aiosqlite://" + url[len("sqlite://"):]
        return url
