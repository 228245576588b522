# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog
"""
Log levels for the logger registry.

Levels are ordered from least verbose (CRITICAL) to most verbose (TRACE).
A package logger emits a message when the message level is less than or
equal to the package's current level.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from repolog.logging.errors import LevelParseError, UnhandledLevelError

NOTICE_STDLIB = 25
TRACE_STDLIB = 5

logging.addLevelName(NOTICE_STDLIB, "NOTICE")
logging.addLevelName(TRACE_STDLIB, "TRACE")


class LogLevel(IntEnum):
    """Verbosity levels."""

    # only errors which will end the program
    CRITICAL = -1
    # not fatal but lead to troubling behavior
    ERROR = 0
    # unusual, often sourced from misconfiguration
    WARNING = 1
    # normal but significant conditions
    NOTICE = 2
    # common, everyday updates
    INFO = 3
    # verbose updates about internal processes
    DEBUG = 4
    # call by call tracing
    TRACE = 5

    def char(self) -> str:
        """Return the single-character representation of this level."""
        return level_char(self)

    def to_stdlib_level(self) -> int:
        """Convert to standard library logging level.

        Returns:
            Standard library logging level integer
        """
        return _STDLIB_LEVELS[self]

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Convert a string to a LogLevel.

        Args:
            value: Name, single character or digit of a level

        Returns:
            LogLevel enum value

        Raises:
            LevelParseError: If the string doesn't match a valid level
        """
        return parse_level(value)


_CHARS: dict[int, str] = {
    LogLevel.CRITICAL: "C",
    LogLevel.ERROR: "E",
    LogLevel.WARNING: "W",
    LogLevel.NOTICE: "N",
    LogLevel.INFO: "I",
    LogLevel.DEBUG: "D",
    LogLevel.TRACE: "T",
}

_STDLIB_LEVELS: dict[LogLevel, int] = {
    LogLevel.CRITICAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.NOTICE: NOTICE_STDLIB,
    LogLevel.INFO: logging.INFO,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.TRACE: TRACE_STDLIB,
}

_PARSE_TABLE: dict[str, LogLevel] = {}
for _level in LogLevel:
    _PARSE_TABLE[_level.name] = _level
    _PARSE_TABLE[_CHARS[_level]] = _level
    # CRITICAL has no digit alias
    if _level >= LogLevel.ERROR:
        _PARSE_TABLE[str(int(_level))] = _level
del _level


def level_char(value: int) -> str:
    """Return the single-character representation of an integer-backed level.

    Raises:
        UnhandledLevelError: ``value`` is not one of the seven levels. This is
            a programming error, never the result of parsing input.
    """
    if not isinstance(value, int):
        raise UnhandledLevelError(value)
    try:
        return _CHARS[value]
    except KeyError:
        raise UnhandledLevelError(value) from None


def parse_level(value: str) -> LogLevel:
    """Translate a level name, character or digit into a LogLevel.

    Matching is case-sensitive. Digits ``0`` to ``5`` map to ERROR through
    TRACE.

    Raises:
        LevelParseError: ``value`` is not a recognized level string.
    """
    try:
        return _PARSE_TABLE[value]
    except (KeyError, TypeError):
        raise LevelParseError(value) from None
