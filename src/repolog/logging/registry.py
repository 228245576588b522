# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog
"""
Process-wide logger registry.

There is exactly one ``LoggerRegistry`` per process: constructing it again
returns the same instance, and it is never torn down. Components register a
package logger by repository and package name from anywhere in the process,
and operators reconfigure levels by the same names. All structural changes,
bulk level changes and formatter swaps are serialized behind one lock.

The module-level functions delegate to the shared ``registry`` instance.
"""

from __future__ import annotations

import logging
import threading

from repolog.logging.errors import FatalLoggingError, RepoNotFoundError
from repolog.logging.formatter import Formatter, NullFormatter
from repolog.logging.level import LogLevel
from repolog.logging.package_logger import PackageLogger
from repolog.logging.repo_logger import RepoLogger

logger = logging.getLogger(__name__)


class LoggerRegistry:
    """Singleton mapping of repository name to RepoLogger plus the formatter."""

    _instance = None
    _init_lock = threading.Lock()

    lock: threading.RLock
    formatter: Formatter

    def __new__(cls) -> "LoggerRegistry":
        with cls._init_lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance.lock = threading.RLock()
                instance.formatter = NullFormatter()
                instance._repos = {}
                cls._instance = instance
            return cls._instance

    def set_global_log_level(self, level: LogLevel) -> None:
        """Set the level of every package in every registered repository."""
        with self.lock:
            for repo in self._repos.values():
                repo._set_all(level)
        logger.debug("Set global log level to %s", level.name)

    def repo_logger(self, repo: str) -> RepoLogger:
        """Return the RepoLogger for ``repo``.

        Raises:
            RepoNotFoundError: No package was ever registered under ``repo``.
        """
        with self.lock:
            try:
                return self._repos[repo]
            except KeyError:
                raise RepoNotFoundError(repo) from None

    def must_repo_logger(self, repo: str) -> RepoLogger:
        """Return the RepoLogger for ``repo``, treating absence as fatal.

        Use during startup wiring where a missing repository is a bug.

        Raises:
            FatalLoggingError: No package was ever registered under ``repo``.
        """
        try:
            return self.repo_logger(repo)
        except RepoNotFoundError as exc:
            raise FatalLoggingError(exc.message, repo=repo) from exc

    def set_formatter(self, formatter: Formatter) -> None:
        """Replace the formatter used by every package logger."""
        with self.lock:
            self.formatter = formatter
        logger.debug("Set formatter to %s", type(formatter).__name__)

    def get_formatter(self) -> Formatter:
        with self.lock:
            return self.formatter

    def new_package_logger(self, repo: str, pkg: str) -> PackageLogger:
        """Return the logger for ``pkg`` in ``repo``, creating it if needed.

        New packages start at INFO. Calling again for the same pair returns
        the same object and leaves its level untouched.
        """
        with self.lock:
            repo_logger = self._repos.get(repo)
            if repo_logger is None:
                repo_logger = RepoLogger(repo, self.lock)
                self._repos[repo] = repo_logger
                logger.debug("Registered repo %s", repo)
            package_logger = repo_logger.get(pkg)
            if package_logger is None:
                package_logger = repo_logger._add(PackageLogger(self, repo, pkg))
                logger.debug("Registered package %s in repo %s", pkg, repo)
            return package_logger

    def repos(self) -> list[str]:
        """Return the names of all registered repositories."""
        with self.lock:
            return list(self._repos)


registry = LoggerRegistry()


def set_global_log_level(level: LogLevel) -> None:
    registry.set_global_log_level(level)


def repo_logger(repo: str) -> RepoLogger:
    return registry.repo_logger(repo)


def must_repo_logger(repo: str) -> RepoLogger:
    return registry.must_repo_logger(repo)


def set_formatter(formatter: Formatter) -> None:
    registry.set_formatter(formatter)


def get_formatter() -> Formatter:
    return registry.get_formatter()


def new_package_logger(repo: str, pkg: str) -> PackageLogger:
    return registry.new_package_logger(repo, pkg)
