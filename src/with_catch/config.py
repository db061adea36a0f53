"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings so a host application can switch on outcome
logging without touching code:

    WITH_CATCH_LOG_OUTCOMES=true
    WITH_CATCH_LOG_LEVEL=DEBUG

Settings are read once and cached; call get_settings.cache_clear() to reload.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = frozenset(logging.getLevelNamesMapping())


class CatchSettings(BaseSettings):
    """
    Library settings.

    Load order (highest priority first):
      1. Environment variables prefixed WITH_CATCH_
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="WITH_CATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_outcomes: bool = Field(
        default=False,
        description="Emit a debug event for every caught or re-raised error",
    )
    log_level: str = Field(default="INFO", description="Level passed to configure_structlog")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names, case-insensitively."""
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(
                f"log_level must be one of {sorted(_LEVEL_NAMES)}, got {value!r}"
            )
        return level


@lru_cache(maxsize=1)
def get_settings() -> CatchSettings:
    """Return the process-wide settings, loading them on first use."""
    return CatchSettings()
