# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Serializable snapshots of error chains.

An ErrorReport separates what operators need (the rendered chain and the
stacktrace) from what clients may see (code and message).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from errchain import codes
from errchain.config import get_settings
from errchain.render import render
from errchain.resolve import (
    error_code,
    error_message,
    error_stacktrace,
    operation_trace,
)


class ErrorReport(BaseModel):
    """Resolved facets of an error chain."""

    model_config = ConfigDict(frozen=True)

    error: str = Field(description="The rendered chain")
    code: str = ""
    message: str = ""
    stacktrace: str = ""
    operations: list[str] = Field(default_factory=list)

    @classmethod
    def from_error(
        cls, err: BaseException, *, include_stacktrace: bool = True
    ) -> ErrorReport:
        """Build a report by resolving every facet of err's chain.

        Args:
            err: The outermost error of the chain
            include_stacktrace: Whether to keep the innermost stacktrace

        Returns:
            A new ErrorReport
        """
        return cls(
            error=render(err),
            code=error_code(err),
            message=error_message(err),
            stacktrace=error_stacktrace(err) if include_stacktrace else "",
            operations=operation_trace(err),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the report."""
        return self.model_dump()

    def client_payload(self, default_message: str | None = None) -> dict[str, str]:
        """Return the fields that are safe to show to a client.

        An unset code becomes "unexpected_error" and an unset message falls
        back to default_message, then to the configured default.
        """
        if default_message is None:
            default_message = get_settings().default_client_message
        return {
            "code": self.code or codes.UNEXPECTED_ERROR,
            "message": self.message or default_message,
        }
