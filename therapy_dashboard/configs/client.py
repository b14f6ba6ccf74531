"""
Dashboard client configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Configuration for the headless dashboard client
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from therapy_dashboard.configs.base import BaseSettings


class ClientSettings(BaseSettings):
    """Dashboard client configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DASHBOARD_",
        case_sensitive=False,
        extra="ignore",
    )

    api_base_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the dashboard REST API",
    )
    page_size: int = Field(default=10, ge=1, description="Rows per dashboard page")
    banner_seconds: float = Field(
        default=3.0,
        gt=0,
        description="Lifetime of transient success/error banners",
    )
