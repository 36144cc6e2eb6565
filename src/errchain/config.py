# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Configuration for errchain.

Settings load from environment variables using Pydantic v2's env support and
are cached after first use. Call reset_settings() to reload them.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ChainSettings(BaseSettings):
    """Settings controlling how chains are built."""

    model_config = SettingsConfigDict(
        env_prefix="ERRCHAIN_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    capture_stacktrace: bool = Field(
        default=True, description="Capture a stacktrace when a chain is started"
    )
    stacktrace_limit: int | None = Field(
        default=None, ge=1, description="Keep only the innermost N frames"
    )
    default_client_message: str = Field(
        default="An unexpected error occurred.",
        description="Message shown to clients when no node sets one",
    )


class LoggingSettings(BaseSettings):
    """Settings for the optional structlog integration."""

    model_config = SettingsConfigDict(
        env_prefix="ERRCHAIN_LOGGING_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    level: LogLevelName = Field(default="INFO", description="Log level")
    json_format: bool = Field(default=False, description="Enable JSON log format")
    include_stacktrace: bool = Field(
        default=True, description="Attach error stacktraces to log entries"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    @property
    def stdlib_level(self) -> int:
        """The level as a standard library logging constant."""
        return logging.getLevelNamesMapping()[self.level]


@lru_cache(maxsize=1)
def get_settings() -> ChainSettings:
    """Return the cached chain settings."""
    return ChainSettings()


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Return the cached logging settings."""
    return LoggingSettings()


def reset_settings() -> None:
    """Drop cached settings so the next access reloads the environment."""
    get_settings.cache_clear()
    get_logging_settings.cache_clear()
