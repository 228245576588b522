"""Command line entry points for repolog."""

from repolog.cli.log_admin import app

__all__ = ["app"]
