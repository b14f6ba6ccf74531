"""
Base configuration settings.

Shared `.env` handling and the process-wide flags every settings class
inherits.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Common settings; subclasses add an env_prefix for their own fields."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "staging", "production"] = "development"
    debug: bool = Field(
        default=False,
        description="Include exception text in 500 response bodies",
    )
    log_level: str = Field(default="INFO", description="Root log level name")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return value
