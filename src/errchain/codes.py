# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: errchain
"""Well-known error codes.

Codes are opaque strings; applications are free to define their own.
"""

from typing import Final

UNEXPECTED_ERROR: Final = "unexpected_error"
DATABASE_ERROR: Final = "database_error"
INTERNAL_ERROR: Final = "internal_error"
NOT_EXISTS: Final = "not_exists"
