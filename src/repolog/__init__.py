# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog

"""
repolog: a process-wide registry of per-package log levels.
"""

from __future__ import annotations

from repolog.logging import (
    BaseLogEntry,
    LogLevel,
    PackageLogger,
    RepoLogger,
    must_repo_logger,
    new_package_logger,
    parse_level,
    repo_logger,
    set_formatter,
    set_global_log_level,
)

__version__ = "0.1.0"

__all__ = [
    "BaseLogEntry",
    "LogLevel",
    "PackageLogger",
    "RepoLogger",
    "must_repo_logger",
    "new_package_logger",
    "parse_level",
    "repo_logger",
    "set_formatter",
    "set_global_log_level",
]
