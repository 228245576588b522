# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog

"""
Error handling for repolog.
"""

from __future__ import annotations

from repolog.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    RepologError,
)
from repolog.errors.registry import ErrorRegistry, registry

__all__ = [
    "ErrorCategory",
    "ErrorCode",
    "ErrorSeverity",
    "RepologError",
    "ErrorRegistry",
    "registry",
]
