# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Capability protocols for errchain.

Existing exception types can implement these to take part in facet
resolution without inheriting from ChainError. The protocols are independent:
a type may implement any one of them without the others.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClientFacing(Protocol):
    """Protocol for errors exposing a client code and message.

    Used by error_code() and error_message().
    """

    def client_code(self) -> str:
        """Short token describing the type of error, e.g. "database_error".

        error_code() should be used to retrieve the outermost code of a chain.
        """
        ...

    def client_message(self) -> str:
        """User-friendly message, logically separate from the error cause.

        error_message() should be used to retrieve the outermost message.
        """
        ...


@runtime_checkable
class HasStacktrace(Protocol):
    """Protocol for errors carrying a captured stacktrace.

    Used by error_stacktrace().
    """

    def get_stacktrace(self) -> str:
        """Return the stacktrace held by this error, if any."""
        ...


@runtime_checkable
class Unwrapper(Protocol):
    """Protocol for errors that expose their immediate cause."""

    def unwrap(self) -> BaseException | None:
        """Return the wrapped error one level down, or None."""
        ...
