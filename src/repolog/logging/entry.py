"""Loggable entries."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LogEntry(Protocol):
    """Anything that can render itself for a log line."""

    def log_string(self) -> str:
        """Return the text to log for this object."""
        ...


class BaseLogEntry(str):
    """Plain string wrapped as a LogEntry."""

    __slots__ = ()

    def log_string(self) -> str:
        return str(self)


def render(entry: object) -> str:
    """Render a single entry to text."""
    if isinstance(entry, LogEntry):
        return entry.log_string()
    return str(entry)
