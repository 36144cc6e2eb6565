"""Top-level pytest configuration for errchain."""

from collections.abc import Callable, Iterator

import pytest
import structlog

from errchain.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch) -> Iterator[None]:
    """Run every test against default settings."""
    for name in (
        "ERRCHAIN_CAPTURE_STACKTRACE",
        "ERRCHAIN_STACKTRACE_LIMIT",
        "ERRCHAIN_DEFAULT_CLIENT_MESSAGE",
        "ERRCHAIN_LOGGING_LEVEL",
        "ERRCHAIN_LOGGING_JSON_FORMAT",
        "ERRCHAIN_LOGGING_INCLUDE_STACKTRACE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def reload_settings() -> Callable[[], None]:
    """Reload settings after changing the environment."""
    return reset_settings


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore structlog's defaults after a test configures it."""
    yield
    structlog.reset_defaults()
