"""Environment-based configuration using pydantic-settings.

Example:
    >>> from cnsl.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.console.indent
    2
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # CNSL_CONSOLE_STREAM=stderr
    # CNSL_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleSettings(BaseSettings):
    """Default console the lazily created root writes to."""

    model_config = SettingsConfigDict(
        env_prefix="CNSL_CONSOLE_",
        extra="ignore",
    )

    kind: Literal["stream", "none"] = "stream"
    stream: Literal["stdout", "stderr"] = "stdout"
    indent: Annotated[int, Field(ge=0, le=8, description="Spaces per group level")] = 2
    colors: bool | None = Field(default=None, description="Force ANSI colors (None = auto-detect)")


class LoggingSettings(BaseSettings):
    """Diagnostics logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CNSL_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class CnslSettings(BaseSettings):
    """Root settings.

    Loads configuration from environment variables with CNSL_ prefix.

    Example environment variables:
        CNSL_CONSOLE_KIND=none
        CNSL_CONSOLE_INDENT=4
        CNSL_LOG_LEVEL=DEBUG
        CNSL_LOG_FORMAT=json
    """

    model_config = SettingsConfigDict(
        env_prefix="CNSL_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    console: ConsoleSettings = Field(default_factory=ConsoleSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def silent(self) -> bool:
        """Whether the default root discards everything."""
        return self.console.kind == "none"


@lru_cache(maxsize=1)
def get_settings() -> CnslSettings:
    """Get the global settings instance (cached)."""
    return CnslSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
