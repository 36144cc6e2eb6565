"""Tests for errchain settings."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from errchain.config import (
    ChainSettings,
    LoggingSettings,
    get_logging_settings,
    get_settings,
)


class TestChainSettings:
    """Tests for ChainSettings."""

    def test_defaults(self) -> None:
        """Test the default values."""
        settings = ChainSettings()

        assert settings.capture_stacktrace is True
        assert settings.stacktrace_limit is None
        assert settings.default_client_message == "An unexpected error occurred."

    def test_loads_environment(self, monkeypatch, reload_settings) -> None:
        """Test that ERRCHAIN_ variables are read."""
        monkeypatch.setenv("ERRCHAIN_CAPTURE_STACKTRACE", "0")
        monkeypatch.setenv("ERRCHAIN_STACKTRACE_LIMIT", "5")
        reload_settings()

        settings = get_settings()

        assert settings.capture_stacktrace is False
        assert settings.stacktrace_limit == 5

    def test_settings_are_cached(self) -> None:
        """Test that the same instance is returned until reset."""
        assert get_settings() is get_settings()

    def test_invalid_limit(self) -> None:
        """Test that the stacktrace limit must be positive."""
        with pytest.raises(ValidationError):
            ChainSettings(stacktrace_limit=0)

    def test_settings_are_frozen(self) -> None:
        """Test that loaded settings cannot change."""
        with pytest.raises(ValidationError):
            get_settings().capture_stacktrace = False


class TestLoggingSettings:
    """Tests for LoggingSettings."""

    def test_level_is_normalized(self) -> None:
        """Test that levels are upper-cased."""
        assert LoggingSettings(level="warning").level == "WARNING"
        assert LoggingSettings(level="Error").level == "ERROR"

    def test_invalid_level(self) -> None:
        """Test that unknown levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level="loud")

    def test_loads_environment(self, monkeypatch, reload_settings) -> None:
        """Test that ERRCHAIN_LOGGING_ variables are read."""
        monkeypatch.setenv("ERRCHAIN_LOGGING_JSON_FORMAT", "true")
        monkeypatch.setenv("ERRCHAIN_LOGGING_LEVEL", "debug")
        reload_settings()

        settings = get_logging_settings()

        assert settings.json_format is True
        assert settings.level == "DEBUG"

    def test_invalid_level_type(self) -> None:
        """Test that non-string levels are rejected."""
        with pytest.raises(ValidationError):
            LoggingSettings(level=10)

    def test_stdlib_level(self) -> None:
        """Test the conversion to standard library level numbers."""
        assert LoggingSettings(level="critical").stdlib_level == logging.CRITICAL
        assert LoggingSettings().stdlib_level == logging.INFO
