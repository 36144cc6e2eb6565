# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Facet resolution over error chains.

Every function here walks a chain from the outermost error toward the root
by repeatedly unwrapping one level. Any exception can be a link: ChainError
nodes, annotations, and foreign exceptions raised ``from`` another error.
"""

from __future__ import annotations

from collections.abc import Iterator

from errchain.protocols import ClientFacing, HasStacktrace, Unwrapper


def unwrap(err: BaseException | None) -> BaseException | None:
    """Return the immediate cause of an error.

    Errors implementing Unwrapper are asked directly; any other exception
    yields its explicit ``__cause__``. Implicit ``__context__`` is ignored.
    """
    if err is None:
        return None
    if isinstance(err, Unwrapper):
        return err.unwrap()
    return getattr(err, "__cause__", None)


def iter_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield each link of a chain, outermost first.

    Stops at the first link without a cause, or when a link repeats.
    """
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        yield err
        err = unwrap(err)


def error_code(err: BaseException | None) -> str:
    """Return the first non-empty code found in the chain, or ""."""
    for link in iter_chain(err):
        if isinstance(link, ClientFacing) and (code := link.client_code()):
            return code
    return ""


def error_message(err: BaseException | None) -> str:
    """Return the first non-empty client message found in the chain, or ""."""
    for link in iter_chain(err):
        if isinstance(link, ClientFacing) and (message := link.client_message()):
            return message
    return ""


def error_stacktrace(err: BaseException | None) -> str:
    """Return the innermost non-empty stacktrace in the chain, or "".

    Unlike code and message, the deepest value wins: the stacktrace is most
    useful from where the fault originated.
    """
    stack = ""
    for link in iter_chain(err):
        if isinstance(link, HasStacktrace) and (found := link.get_stacktrace()):
            stack = found
    return stack


def operation_trace(err: BaseException | None) -> list[str]:
    """List the operations recorded along the chain, outermost first."""
    from errchain.base import ChainError

    return [
        link.op for link in iter_chain(err) if isinstance(link, ChainError) and link.op
    ]
