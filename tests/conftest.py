"""Top-level pytest configuration for repolog."""

import uuid

import pytest

from repolog.logging.registry import registry


# The registry is process-wide and never torn down, so every test works in
# repositories of its own.
@pytest.fixture
def repo_name() -> str:
    return f"repo-{uuid.uuid4().hex}"


@pytest.fixture
def other_repo_name() -> str:
    return f"repo-{uuid.uuid4().hex}"


@pytest.fixture
def restore_formatter():
    original = registry.get_formatter()
    yield
    registry.set_formatter(original)


class RecordingFormatter:
    """Formatter that keeps every call for inspection."""

    def __init__(self):
        self.records = []
        self.flushes = 0

    def format(self, pkg, level, entry):
        self.records.append((pkg, level, entry))

    def flush(self):
        self.flushes += 1


@pytest.fixture
def recording_formatter(restore_formatter):
    formatter = RecordingFormatter()
    registry.set_formatter(formatter)
    return formatter
