# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog
"""
Repository-scoped level management.

A repository groups the package loggers of one deployable unit. Levels can
be set for the whole repository at once or per package from a
``pkg=level,pkg=level`` configuration string.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping

from repolog.logging.errors import ConfigFormatError
from repolog.logging.level import LogLevel, parse_level
from repolog.logging.package_logger import PackageLogger

logger = logging.getLogger(__name__)

WILDCARD = "*"


def parse_log_level_config(conf: str) -> dict[str, LogLevel]:
    """Parse a comma-separated string of ``pkg=level`` settings.

    Tokens are parsed in order and a later duplicate overrides an earlier
    one. ``*`` may be used as the package name to address every package.
    Nothing is applied; pass the result to ``RepoLogger.set_log_level``.

    Args:
        conf: Configuration string such as ``"*=ERROR,raft=DEBUG"``

    Returns:
        Mapping of package name to requested level

    Raises:
        ConfigFormatError: A token does not split into exactly two parts on ``=``
        LevelParseError: A level part is not a recognized level
    """
    out: dict[str, LogLevel] = {}
    for token in conf.split(","):
        setting = token.split("=")
        if len(setting) != 2:
            raise ConfigFormatError(token)
        pkg, level = setting
        out[pkg] = parse_level(level)
    return out


class RepoLogger(Mapping[str, PackageLogger]):
    """Read-only mapping of package name to PackageLogger for one repository.

    Mutating methods take the registry-wide lock they were created with.
    """

    def __init__(self, name: str, lock: threading.RLock) -> None:
        self.name = name
        self._lock = lock
        self._packages: dict[str, PackageLogger] = {}

    def __repr__(self) -> str:
        return f"RepoLogger({self.name!r}, packages={sorted(self._packages)!r})"

    def __getitem__(self, pkg: str) -> PackageLogger:
        return self._packages[pkg]

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._packages))

    def __len__(self) -> int:
        return len(self._packages)

    def _add(self, package_logger: PackageLogger) -> PackageLogger:
        # Caller holds the lock.
        self._packages[package_logger.pkg] = package_logger
        return package_logger

    def _set_all(self, level: LogLevel) -> None:
        # Caller holds the lock.
        for package_logger in self._packages.values():
            package_logger._set_level(level)

    def set_repo_log_level(self, level: LogLevel) -> None:
        """Set the level of every package in this repository."""
        with self._lock:
            self._set_all(level)
        logger.debug("Set repo %s to %s", self.name, level.name)

    def parse_log_level_config(self, conf: str) -> dict[str, LogLevel]:
        """Parse ``conf`` without applying it. See ``parse_log_level_config``."""
        return parse_log_level_config(conf)

    def set_log_level(self, levels: Mapping[str, LogLevel]) -> None:
        """Apply a mapping of package name to level.

        ``*`` is applied first to every package, then each named package is
        set. Packages not registered in this repository are ignored so one
        configuration string can be shared by binaries with different
        package sets.
        """
        with self._lock:
            if WILDCARD in levels:
                self._set_all(levels[WILDCARD])
            for pkg, level in levels.items():
                package_logger = self._packages.get(pkg)
                if package_logger is None:
                    continue
                package_logger._set_level(level)
        logger.debug("Applied levels to repo %s: %s", self.name, dict(levels))

    def levels(self) -> dict[str, LogLevel]:
        """Return a snapshot of the current level of every package."""
        with self._lock:
            return {pkg: p.level for pkg, p in self._packages.items()}
