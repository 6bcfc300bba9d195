"""
Configuration Management for Expense Tracker

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: All configuration is centralized here.
The store path is resolved once by the caller and handed to the storage
layer explicitly, so nothing below the CLI reads settings for file locations.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrackerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from EXPENSE_TRACKER_* environment variables
    and the .env file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Storage
    store_path: Path = Field(
        default=Path("expenses.json"),
        description="Path of the JSON expense store, relative to the working directory"
    )
    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used when writing the store"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level for audit/diagnostic logs (written to stderr)"
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Renderer for structured logs"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize to an upper-case stdlib level name."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def resolved_store_path(self) -> Path:
        """Store path made absolute against the current working directory."""
        return self.store_path.expanduser().resolve()


@lru_cache()
def get_settings() -> TrackerSettings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return TrackerSettings()
