# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Textual rendering of error chains.

A chain renders outermost to innermost as::

    Outer: [code] (annotation): Inner: root cause text

Only the code that error_code() resolves is printed: after the op of the
ChainError that holds it, or before the text of a foreign ClientFacing link.
Client messages are never rendered.
"""

from __future__ import annotations

from errchain.base import Annotation, ChainError
from errchain.protocols import ClientFacing
from errchain.resolve import iter_chain, unwrap


def render(err: BaseException | None) -> str:
    """Render a chain as a single line.

    Args:
        err: The outermost error of the chain

    Returns:
        The rendered chain, or "" for None
    """
    parts: list[str] = []
    code_found = False
    for link in iter_chain(err):
        code = ""
        if not code_found and isinstance(link, ClientFacing):
            code = link.client_code()
            code_found = bool(code)
        if isinstance(link, ChainError):
            if link.op:
                parts.append(f"{link.op}: ")
            if code:
                parts.append(f"[{code}] ")
            continue
        if code:
            parts.append(f"[{code}] ")
        if isinstance(link, Annotation):
            parts.append(f"({link.info}): ")
        elif unwrap(link) is None:
            parts.append(str(link))
        else:
            text = str(link)
            if text:
                parts.append(f"{text}: ")
    return "".join(parts)
