# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog

"""
Public API of the logger registry.

Packages register a logger once with ``new_package_logger`` and check its
level on every call; operators adjust levels per package, per repository or
globally at runtime.
"""

from __future__ import annotations

from repolog.logging.config import LoggingSettings, apply_settings
from repolog.logging.entry import BaseLogEntry, LogEntry
from repolog.logging.errors import (
    ConfigFormatError,
    FatalLoggingError,
    LevelParseError,
    LoggingError,
    RepoNotFoundError,
    UnhandledLevelError,
)
from repolog.logging.formatter import Formatter, NullFormatter, StdlibFormatter
from repolog.logging.level import LogLevel, level_char, parse_level
from repolog.logging.package_logger import PackageLogger
from repolog.logging.registry import (
    LoggerRegistry,
    get_formatter,
    must_repo_logger,
    new_package_logger,
    registry,
    repo_logger,
    set_formatter,
    set_global_log_level,
)
from repolog.logging.repo_logger import RepoLogger, parse_log_level_config

__all__ = [
    # Levels
    "LogLevel",
    "level_char",
    "parse_level",
    # Loggers
    "PackageLogger",
    "RepoLogger",
    "LoggerRegistry",
    "registry",
    # Registry operations
    "new_package_logger",
    "repo_logger",
    "must_repo_logger",
    "set_global_log_level",
    "set_formatter",
    "get_formatter",
    "parse_log_level_config",
    # Output
    "Formatter",
    "NullFormatter",
    "StdlibFormatter",
    "LogEntry",
    "BaseLogEntry",
    # Errors
    "LoggingError",
    "LevelParseError",
    "ConfigFormatError",
    "RepoNotFoundError",
    "FatalLoggingError",
    "UnhandledLevelError",
    # Settings
    "LoggingSettings",
    "apply_settings",
]
