# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain

"""
Layered application errors with codes, client messages and operation traces.
"""

from __future__ import annotations

from errchain.base import Annotation, ChainError
from errchain.factory import new, newf, wrap, wrapf
from errchain.frames import caller_name, capture_stacktrace
from errchain.helpers import clear_message, set_code, set_message
from errchain.protocols import ClientFacing, HasStacktrace, Unwrapper
from errchain.render import render
from errchain.report import ErrorReport
from errchain.resolve import (
    error_code,
    error_message,
    error_stacktrace,
    iter_chain,
    operation_trace,
    unwrap,
)

__all__ = [
    # Chain links
    "ChainError",
    "Annotation",
    # Construction
    "new",
    "newf",
    "wrap",
    "wrapf",
    # None-safe mutators
    "set_code",
    "set_message",
    "clear_message",
    # Resolution
    "error_code",
    "error_message",
    "error_stacktrace",
    "operation_trace",
    "iter_chain",
    "unwrap",
    "render",
    # Compatibility protocols
    "ClientFacing",
    "HasStacktrace",
    "Unwrapper",
    # Introspection
    "caller_name",
    "capture_stacktrace",
    # Reporting
    "ErrorReport",
]
