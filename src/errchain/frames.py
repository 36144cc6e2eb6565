# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""
Call-stack introspection used to name operations and capture stacktraces.

Both helpers read only the frames of the calling thread and are evaluated
on every call.
"""

from __future__ import annotations

import asyncio
import inspect
import traceback
from types import FrameType
from typing import Final

UNKNOWN_OPERATION: Final = "unknown"


def _walk_back(frame: FrameType | None, offset: int) -> FrameType | None:
    for _ in range(offset):
        if frame is None:
            return None
        frame = frame.f_back
    return frame


def _task_suffix(frame: FrameType) -> str | None:
    """Name of the running asyncio task if frame is that task's coroutine."""
    try:
        task = asyncio.current_task()
    except RuntimeError:
        # No running event loop in this thread
        return None
    if task is None:
        return None
    coro = task.get_coro()
    if getattr(coro, "cr_frame", None) is frame:
        return task.get_name()
    return None


def frame_name(frame: FrameType) -> str:
    """Return the operation name for a frame.

    The qualified name is used without its module, and ``<locals>``
    segments are dropped so a closure reads as ``outer.inner`` and a lambda
    as ``outer.<lambda>``. The root coroutine of an asyncio task gets the
    task name appended. This applies to every task, including the single
    main task of ``asyncio.run()``, so tasks left with default names
    (``Task-1``, ``Task-4``) give names that vary between runs. Name tasks
    explicitly for stable operation names.
    """
    name = frame.f_code.co_qualname.replace(".<locals>", "")
    suffix = _task_suffix(frame)
    if suffix:
        return f"{name}.{suffix}"
    return name


def caller_name(offset: int = 1) -> str:
    """Get the name of the function ``offset`` frames above this one.

    Threads get no suffix: the same function running in two threads
    resolves to one name.

    Args:
        offset: 0 is caller_name itself, 1 its caller, and so on. Negative
            values resolve to caller_name itself.

    Returns:
        The operation name, or "unknown" when the stack is not that deep
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        # Interpreters without frame support
        return UNKNOWN_OPERATION
    frame = _walk_back(current_frame, max(offset, 0))
    try:
        if frame is None:
            return UNKNOWN_OPERATION
        return frame_name(frame)
    finally:
        del frame, current_frame


def capture_stacktrace(offset: int = 1, limit: int | None = None) -> str:
    """Format the call stack starting ``offset`` frames above this one.

    Args:
        offset: 0 starts at capture_stacktrace itself, 1 at its caller
        limit: Keep only the innermost ``limit`` frames

    Returns:
        The formatted stack, outermost frame first, or "" if unavailable
    """
    current_frame = inspect.currentframe()
    frame = _walk_back(current_frame, max(offset, 0))
    try:
        if frame is None:
            return ""
        return "".join(traceback.format_stack(frame, limit=limit))
    finally:
        del frame, current_frame
