"""
Per-package logger handle.

A ``PackageLogger`` is created once by the registry and handed out to every
caller that asks for the same repository and package. Reading its level is
lock-free; changing it goes through the repository or registry setters.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from repolog.logging.entry import render
from repolog.logging.level import LogLevel

if TYPE_CHECKING:
    from repolog.logging.registry import LoggerRegistry


def _format_message(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply ``%`` formatting the way ``logging.LogRecord.getMessage`` does.

    A lone non-empty mapping argument is used for ``%(name)s`` lookups. A
    format string that does not match its arguments never raises; the
    arguments are appended to the unformatted string instead.
    """
    if not args:
        return fmt
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        return f"{fmt} {args!r}"


class PackageLogger:
    """Named leaf logger holding the current level for one package."""

    __slots__ = ("_registry", "_repo", "_pkg", "_level")

    def __init__(
        self,
        registry: LoggerRegistry,
        repo: str,
        pkg: str,
        level: LogLevel = LogLevel.INFO,
    ) -> None:
        self._registry = registry
        self._repo = repo
        self._pkg = pkg
        self._level = level

    def __repr__(self) -> str:
        return f"PackageLogger(repo={self._repo!r}, pkg={self._pkg!r}, level={self._level.name})"

    @property
    def repo(self) -> str:
        return self._repo

    @property
    def pkg(self) -> str:
        return self._pkg

    @property
    def level(self) -> LogLevel:
        """Current level. Read without taking the registry lock."""
        return self._level

    def _set_level(self, level: LogLevel) -> None:
        # Caller holds the registry lock.
        self._level = level

    def level_at(self, level: LogLevel) -> bool:
        """Return True if a message at ``level`` would be logged."""
        return level == LogLevel.CRITICAL or level <= self._level

    def log(self, level: LogLevel, *entries: Any) -> None:
        """Log ``entries`` at ``level``, joined by single spaces."""
        if not self.level_at(level):
            return
        self._emit(level, " ".join(render(entry) for entry in entries))

    def logf(self, level: LogLevel, fmt: str, *args: Any) -> None:
        """Log a ``%``-formatted message at ``level``."""
        if not self.level_at(level):
            return
        self._emit(level, _format_message(fmt, args))

    def _emit(self, level: LogLevel, message: str) -> None:
        with self._registry.lock:
            self._registry.formatter.format(self._pkg, level, message)

    def critical(self, fmt: str, *args: Any) -> None:
        self.logf(LogLevel.CRITICAL, fmt, *args)

    def error(self, fmt: str, *args: Any) -> None:
        self.logf(LogLevel.ERROR, fmt, *args)

    def warning(self, fmt: str, *args: Any) -> None:
        self.logf(LogLevel.WARNING, fmt, *args)

    def notice(self, fmt: str, *args: Any) -> None:
        self.logf(LogLevel.NOTICE, fmt, *args)

    def info(self, fmt: str, *args: Any) -> None:
        self.logf(LogLevel.INFO, fmt, *args)

    def debug(self, fmt: str, *args: Any) -> None:
        self.logf(LogLevel.DEBUG, fmt, *args)

    def trace(self, fmt: str, *args: Any) -> None:
        self.logf(LogLevel.TRACE, fmt, *args)

    def flush(self) -> None:
        """Flush the registry's current formatter."""
        with self._registry.lock:
            self._registry.formatter.flush()
