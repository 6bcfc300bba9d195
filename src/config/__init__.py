"""Configuration package."""

from src.config.settings import (
    TrackerSettings,
    get_settings,
)

__all__ = [
    "TrackerSettings",
    "get_settings",
]
