# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
None-safe mutators.

wrap() returns None when there is nothing to wrap, so these accept None and
pass it through::

    return set_code(wrap("load", err), codes.DATABASE_ERROR)
"""

from __future__ import annotations

from errchain.base import ChainError


def _node(err: object, action: str) -> ChainError | None:
    if err is None or isinstance(err, ChainError):
        return err
    raise TypeError(f"Cannot {action} on {type(err).__name__}; wrap it first")


def set_code(err: ChainError | None, code: str) -> ChainError | None:
    """Set the code on err, or do nothing if err is None."""
    node = _node(err, "set code")
    return node.set_code(code) if node is not None else None


def set_message(err: ChainError | None, message: str) -> ChainError | None:
    """Set the client message on err, or do nothing if err is None."""
    node = _node(err, "set message")
    return node.set_message(message) if node is not None else None


def clear_message(err: ChainError | None) -> ChainError | None:
    """Clear every client message in err's chain, or do nothing if err is None."""
    node = _node(err, "clear message")
    return node.clear_message() if node is not None else None
