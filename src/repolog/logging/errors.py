# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog
"""
Errors raised by the logger registry.

Parse and lookup errors are recoverable and returned to the caller by
raising. Fatal errors signal a programming error and are not meant to be
handled by library code.
"""

from __future__ import annotations

from typing import Any, Final

from repolog.errors.base import ErrorCategory, ErrorCode, ErrorSeverity, RepologError

LOGGING: Final = ErrorCategory.get_or_create("LOGGING")
LOGGING_ERROR: Final = ErrorCode.get_or_create("LOGGING_ERROR", LOGGING)
LOGGING_CONFIGURATION: Final = ErrorCode.get_or_create("LOGGING_CONFIGURATION", LOGGING)
LOGGING_LEVEL_PARSE: Final = ErrorCode.get_or_create("LOGGING_LEVEL_PARSE", LOGGING)
LOGGING_CONFIG_FORMAT: Final = ErrorCode.get_or_create("LOGGING_CONFIG_FORMAT", LOGGING)
LOGGING_REPO_NOT_FOUND: Final = ErrorCode.get_or_create(
    "LOGGING_REPO_NOT_FOUND", LOGGING
)
LOGGING_UNHANDLED_LEVEL: Final = ErrorCode.get_or_create(
    "LOGGING_UNHANDLED_LEVEL", LOGGING
)
LOGGING_FATAL: Final = ErrorCode.get_or_create("LOGGING_FATAL", LOGGING)


class LoggingError(RepologError):
    """Base exception for all logging-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = LOGGING_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class LevelParseError(LoggingError, ValueError):
    """Raised when a string is not a recognized log level."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"couldn't parse log level {value}",
            code=LOGGING_LEVEL_PARSE,
            value=value,
        )
        self.value = value


class ConfigFormatError(LoggingError, ValueError):
    """Raised when a ``pkg=level`` token does not have exactly two parts."""

    def __init__(self, token: str) -> None:
        super().__init__(
            f"oddly structured `pkg=level` option: {token}",
            code=LOGGING_CONFIG_FORMAT,
            token=token,
        )
        self.token = token


class RepoNotFoundError(LoggingError, LookupError):
    """Raised when no package has been registered under a repository name."""

    def __init__(self, repo: str) -> None:
        super().__init__(
            f"no packages registered for repo {repo}",
            code=LOGGING_REPO_NOT_FOUND,
            repo=repo,
        )
        self.repo = repo


class FatalLoggingError(LoggingError):
    """Unrecoverable error: the caller asserted a condition that does not hold."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = LOGGING_FATAL,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=ErrorSeverity.FATAL,
            context=context,
            **kwargs,
        )


class UnhandledLevelError(FatalLoggingError):
    """Raised when an integer outside the known levels reaches serialization."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"unhandled log level {value!r}",
            code=LOGGING_UNHANDLED_LEVEL,
            value=value,
        )
        self.value = value
