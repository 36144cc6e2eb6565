# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Constructors for error chains.

Pass ``op=None`` to name the operation after the calling function; pass ""
to leave it out of the rendered chain.

Usage::

    def get_user(user_id):
        row = db.get(user_id)
        if row is None:
            raise errchain.new("get_user", codes.NOT_EXISTS, "no such user")
        return row

    def handler(user_id):
        try:
            return get_user(user_id)
        except errchain.ChainError as exc:
            raise errchain.wrap("handler", exc, f"user id: {user_id}")

Wrapping a foreign exception and classifying it::

    try:
        db.get(user_id)
    except DatabaseError as exc:
        raise errchain.wrap(None, exc).set_code(codes.DATABASE_ERROR)
"""

from __future__ import annotations

from typing import Any, overload

from errchain.base import Annotation, ChainError
from errchain.config import get_settings
from errchain.frames import caller_name, capture_stacktrace
from errchain.resolve import error_stacktrace

# caller_name, the public constructor, then its caller
_CALLER_OFFSET = 2


def _fresh_stacktrace() -> str:
    settings = get_settings()
    if not settings.capture_stacktrace:
        return ""
    # capture_stacktrace, this helper, the public constructor, then its caller
    return capture_stacktrace(3, settings.stacktrace_limit)


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    return fmt % args if args else fmt


def _link(op: str, err: BaseException, info: str | None, stacktrace: str) -> ChainError:
    cause = err if info is None else Annotation(info, err)
    return ChainError(op, cause, stacktrace=stacktrace)


def new(op: str | None, code: str, cause: str) -> ChainError:
    """Start a new chain.

    Args:
        op: Operation name, conventionally the function name; None to
            capture it from the caller
        code: Short token describing the error, may be ""
        cause: Text of the root error, may be ""

    Returns:
        A ChainError wrapping Exception(cause)
    """
    if op is None:
        op = caller_name(_CALLER_OFFSET)
    return ChainError(op, Exception(cause), code=code, stacktrace=_fresh_stacktrace())


def newf(op: str | None, code: str, fmt: str, *args: Any) -> ChainError:
    """Start a new chain with ``fmt % args`` as the root error text."""
    if op is None:
        op = caller_name(_CALLER_OFFSET)
    return ChainError(
        op, Exception(_format(fmt, args)), code=code, stacktrace=_fresh_stacktrace()
    )


@overload
def wrap(op: str | None, err: None, info: str | None = None) -> None: ...


@overload
def wrap(op: str | None, err: BaseException, info: str | None = None) -> ChainError: ...


def wrap(
    op: str | None, err: BaseException | None, info: str | None = None
) -> ChainError | None:
    """Add an operation to the chain of an existing error.

    The new node starts without code or message; chain set_code() when
    wrapping a foreign error that does not implement ClientFacing. If the
    chain already holds a stacktrace it is carried forward, otherwise one is
    captured here.

    Args:
        op: Operation name; None to capture it from the caller
        err: The error to wrap; None makes this a no-op
        info: Extra context rendered as ``(info): `` before the cause

    Returns:
        The new ChainError, or None if err is None
    """
    if err is None:
        return None
    if op is None:
        op = caller_name(_CALLER_OFFSET)
    stacktrace = error_stacktrace(err) or _fresh_stacktrace()
    return _link(op, err, info, stacktrace)


def wrapf(
    op: str | None, err: BaseException | None, fmt: str, *args: Any
) -> ChainError | None:
    """Like wrap(), with the context formatted as ``fmt % args``."""
    if err is None:
        return None
    if op is None:
        op = caller_name(_CALLER_OFFSET)
    stacktrace = error_stacktrace(err) or _fresh_stacktrace()
    return _link(op, err, _format(fmt, args), stacktrace)
