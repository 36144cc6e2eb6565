# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Structured logging for error chains.

errchain itself never logs. This module lets applications log chains with
their facets as separate structured fields::

    configure_logging()
    logger = get_logger(__name__)
    log_error(logger, "request failed", err, path=request.path)
"""

from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from errchain.config import LoggingSettings, get_logging_settings
from errchain.render import render
from errchain.resolve import (
    error_code,
    error_message,
    error_stacktrace,
    operation_trace,
)


def add_error_facets(_: Any, __: str, event_dict: EventDict) -> EventDict:
    """Expand an ``error`` entry into its resolved facets.

    Args:
        _: The logger instance
        __: The log method name
        event_dict: The event dictionary to modify

    Returns:
        The event dictionary with ``error`` rendered as text and
        ``error_code``, ``error_message``, ``error_operations`` and
        optionally ``error_stacktrace`` added
    """
    error = event_dict.get("error")
    if not isinstance(error, BaseException):
        return event_dict

    event_dict["error"] = render(error)
    event_dict["error_type"] = type(error).__name__
    if code := error_code(error):
        event_dict["error_code"] = code
    if message := error_message(error):
        event_dict["error_message"] = message
    if operations := operation_trace(error):
        event_dict["error_operations"] = operations
    if get_logging_settings().include_stacktrace:
        if stacktrace := error_stacktrace(error):
            event_dict["error_stacktrace"] = stacktrace
    return event_dict


def configure_logging(settings: LoggingSettings | None = None) -> list[Processor]:
    """Configure structlog and the standard library logger.

    Args:
        settings: Logging settings; the cached environment settings if None

    Returns:
        The configured processor chain
    """
    settings = settings or get_logging_settings()
    level = settings.stdlib_level

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_error_facets,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if settings.json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )
    return processors


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger."""
    return structlog.get_logger(name)


def log_error(logger: Any, event: str, err: BaseException, **context: Any) -> None:
    """Log an error chain at error level.

    Args:
        logger: A structlog (or compatible) logger
        event: The log event text
        err: The error chain to attach
        **context: Additional context
    """
    logger.error(event, error=err, **context)
