"""Configuration management using pydantic-settings."""

from .settings import (
    CnslSettings,
    ConsoleSettings,
    LoggingSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "CnslSettings",
    "ConsoleSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "get_settings",
]
