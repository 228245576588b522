# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: repolog
"""
Environment-driven configuration for the logger registry.

Settings are read from ``REPOLOG_*`` environment variables and applied to
the registry with ``apply_settings``. Nothing is persisted; the embedding
program re-applies settings whenever it wants a change.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repolog.logging.errors import LoggingError, RepoNotFoundError
from repolog.logging.formatter import StdlibFormatter
from repolog.logging.level import parse_level
from repolog.logging.registry import LoggerRegistry
from repolog.logging.registry import registry as default_registry
from repolog.logging.repo_logger import parse_log_level_config

logger = logging.getLogger(__name__)


class LoggingSettings(BaseSettings):
    """
    Configuration settings for the logger registry.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="REPOLOG_",
        extra="ignore",
        case_sensitive=False,
        frozen=False,
    )

    level: str | None = Field(
        default=None, description="Level applied to every package in every repo"
    )
    repo_levels: dict[str, str] = Field(
        default_factory=dict,
        description="Repository name to `pkg=level` configuration string",
    )
    stdlib: bool = Field(
        default=False, description="Forward log output to the logging module"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: Any) -> str | None:
        """Validate that the level is a valid log level."""
        if v is None:
            return v
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        try:
            parse_level(v)
        except LoggingError as exc:
            raise ValueError(exc.message) from exc
        return v

    @field_validator("repo_levels")
    @classmethod
    def validate_repo_levels(cls, v: dict[str, str]) -> dict[str, str]:
        """Validate every repository configuration string."""
        for repo, conf in v.items():
            try:
                parse_log_level_config(conf)
            except LoggingError as exc:
                raise ValueError(f"repo {repo}: {exc.message}") from exc
        return v

    @classmethod
    def load(cls) -> LoggingSettings:
        """
        Load logging settings from environment variables or defaults.
        Returns:
            LoggingSettings: Loaded and validated settings instance.
        """
        return cls()


def apply_settings(
    settings: LoggingSettings, registry: LoggerRegistry | None = None
) -> None:
    """Apply ``settings`` to the registry.

    The global level is applied first, then each repository's configuration.
    Repositories with no registered packages are skipped.
    """
    if registry is None:
        registry = default_registry

    if settings.level is not None:
        registry.set_global_log_level(parse_level(settings.level))

    for repo, conf in settings.repo_levels.items():
        try:
            repo_logger = registry.repo_logger(repo)
        except RepoNotFoundError:
            logger.warning("Skipping levels for unknown repo %s", repo)
            continue
        repo_logger.set_log_level(parse_log_level_config(conf))

    if settings.stdlib:
        registry.set_formatter(StdlibFormatter())
