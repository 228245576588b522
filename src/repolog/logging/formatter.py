# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog
"""
Formatters receive messages that passed a package logger's level check.

The registry holds a single formatter for the whole process. The default
formatter discards everything; ``StdlibFormatter`` forwards to Python's
standard ``logging`` module so the usual handlers decide where output goes.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from repolog.logging.level import LogLevel


@runtime_checkable
class Formatter(Protocol):
    """Protocol for rendering an already-filtered message."""

    def format(self, pkg: str, level: LogLevel, entry: str) -> None:
        """Render ``entry`` logged by package ``pkg`` at ``level``."""
        ...

    def flush(self) -> None:
        """Flush any buffered output."""
        ...


class NullFormatter:
    """Formatter that drops every message."""

    def format(self, pkg: str, level: LogLevel, entry: str) -> None:
        pass

    def flush(self) -> None:
        pass


class StdlibFormatter:
    """Formatter that forwards messages to standard library loggers.

    Each package logs to ``logging.getLogger(f"{root}.{pkg}")`` at the
    level returned by ``LogLevel.to_stdlib_level``. The level character is
    attached to the record as ``repolog_level``.
    """

    def __init__(self, root: str = "repolog") -> None:
        self.root = root
        self.root_logger = logging.getLogger(root)

    def logger_for(self, pkg: str) -> logging.Logger:
        return self.root_logger.getChild(pkg)

    def format(self, pkg: str, level: LogLevel, entry: str) -> None:
        self.logger_for(pkg).log(
            level.to_stdlib_level(),
            entry,
            extra={"repolog_level": level.char()},
        )

    def flush(self) -> None:
        logger: logging.Logger | None = self.root_logger
        while logger is not None:
            for handler in logger.handlers:
                handler.flush()
            logger = logger.parent if logger.propagate else None
