# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Chain link types for errchain.

A chain is a sequence of ChainError nodes (and optional Annotation links)
ending in exactly one foreign leaf exception, usually a plain Exception built
from a string.
"""

from __future__ import annotations

from errchain.resolve import iter_chain


def _check_cause(owner: str, cause: object) -> BaseException:
    if cause is None:
        raise TypeError(
            f"{owner} requires a cause; the root of a chain must be a leaf error"
        )
    if not isinstance(cause, BaseException):
        raise TypeError(
            f"{owner} cause must be an exception, not {type(cause).__name__}"
        )
    return cause


class ChainError(Exception):
    """
    A standard application error.

    Holds an operation name, an optional code, an optional client message and
    an optional stacktrace, and always wraps a cause. Use errchain.new() and
    errchain.wrap() rather than instantiating directly.

    The client message is never part of str(); retrieve it with
    errchain.error_message().
    """

    def __init__(
        self,
        op: str,
        cause: BaseException,
        *,
        code: str = "",
        message: str = "",
        stacktrace: str = "",
    ) -> None:
        """Initialize a chain node.

        Args:
            op: Operation being performed, usually a function name
            cause: The wrapped error; must not be None
            code: Short classification token, e.g. "database_error"
            message: User-friendly message
            stacktrace: Formatted call stack captured at construction

        Raises:
            TypeError: If cause is None or not an exception
        """
        cause = _check_cause(type(self).__name__, cause)
        super().__init__(op, cause)
        self._op = op
        self._cause = cause
        self._code = code
        self._message = message
        self._stacktrace = stacktrace
        self.__cause__ = cause

    @property
    def op(self) -> str:
        return self._op

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def code(self) -> str:
        """Code set on this node only; see errchain.error_code() for the chain."""
        return self._code

    @property
    def message(self) -> str:
        """Message set on this node only; see errchain.error_message()."""
        return self._message

    @property
    def stacktrace(self) -> str:
        return self._stacktrace

    def unwrap(self) -> BaseException:
        return self._cause

    def client_code(self) -> str:
        return self._code

    def client_message(self) -> str:
        return self._message

    def get_stacktrace(self) -> str:
        return self._stacktrace

    def set_code(self, code: str) -> ChainError:
        """Set the code on this node and return it for chaining.

        Deeper nodes keep their codes; the outermost code wins on resolution.
        """
        self._code = code
        return self

    def set_message(self, message: str) -> ChainError:
        """Set a user-friendly message on this node and return it.

        The message must already be suitable for the end user.
        """
        self._message = message
        return self

    def clear_message(self) -> ChainError:
        """Unset the message on this node and on every node below it.

        This cascades through the whole chain, including past foreign links,
        so that error_message() returns "" afterwards. Clearing only the
        receiver would let a deeper message resurface.
        """
        for link in iter_chain(self):
            if isinstance(link, ChainError):
                link._message = ""
        return self

    def __str__(self) -> str:
        from errchain.render import render

        return render(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(op={self._op!r}, code={self._code!r}, "
            f"cause={self._cause!r})"
        )


class Annotation(Exception):
    """Context string interposed between a node and its cause.

    Rendered as ``(info): `` and ignored by code, message and stacktrace
    resolution.
    """

    def __init__(self, info: str, cause: BaseException) -> None:
        cause = _check_cause(type(self).__name__, cause)
        super().__init__(info, cause)
        self.info = info
        self._cause = cause
        self.__cause__ = cause

    def unwrap(self) -> BaseException:
        return self._cause

    def __str__(self) -> str:
        from errchain.render import render

        return render(self)
