import threading

import pytest

from repolog.logging.errors import FatalLoggingError, RepoNotFoundError
from repolog.logging.formatter import NullFormatter
from repolog.logging.level import LogLevel
from repolog.logging.registry import (
    LoggerRegistry,
    get_formatter,
    must_repo_logger,
    new_package_logger,
    registry,
    repo_logger,
    set_formatter,
    set_global_log_level,
)


def test_registry_is_a_singleton():
    assert LoggerRegistry() is registry
    assert LoggerRegistry() is LoggerRegistry()


def test_new_package_logger_defaults_to_info(repo_name):
    logger = new_package_logger(repo_name, "pkg")
    assert logger.repo == repo_name
    assert logger.pkg == "pkg"
    assert logger.level is LogLevel.INFO


def test_new_package_logger_is_idempotent(repo_name):
    first = new_package_logger(repo_name, "pkgA")
    second = new_package_logger(repo_name, "pkgA")
    assert first is second

    repo_logger(repo_name).set_repo_log_level(LogLevel.TRACE)
    again = new_package_logger(repo_name, "pkgA")
    # Re-registration does not reset the level
    assert again.level is LogLevel.TRACE
    assert first.level is LogLevel.TRACE


def test_new_package_logger_concurrent_registration(repo_name):
    results = []
    barrier = threading.Barrier(8)

    def register():
        barrier.wait()
        results.append(new_package_logger(repo_name, "shared"))

    threads = [threading.Thread(target=register) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 8
    assert all(r is results[0] for r in results)
    assert len(repo_logger(repo_name)) == 1


def test_repo_logger_unknown_repo():
    with pytest.raises(RepoNotFoundError) as excinfo:
        repo_logger("unknown-repo-never-registered")
    assert "unknown-repo-never-registered" in str(excinfo.value)
    assert excinfo.value.repo == "unknown-repo-never-registered"
    assert isinstance(excinfo.value, LookupError)


def test_repo_logger_lookup_does_not_create():
    with pytest.raises(RepoNotFoundError):
        repo_logger("not-created-by-lookup")
    assert "not-created-by-lookup" not in registry.repos()
    with pytest.raises(RepoNotFoundError):
        repo_logger("not-created-by-lookup")


def test_must_repo_logger_unknown_repo_is_fatal():
    with pytest.raises(FatalLoggingError) as excinfo:
        must_repo_logger("unknown-must-repo")
    assert excinfo.value.severity.value == "fatal"
    assert isinstance(excinfo.value.__cause__, RepoNotFoundError)


def test_must_repo_logger_known_repo(repo_name):
    new_package_logger(repo_name, "pkg")
    assert must_repo_logger(repo_name) is repo_logger(repo_name)


def test_set_global_log_level(repo_name, other_repo_name):
    a = new_package_logger(repo_name, "a")
    b = new_package_logger(repo_name, "b")
    c = new_package_logger(other_repo_name, "c")
    repo_logger(repo_name).set_log_level({"a": LogLevel.TRACE, "b": LogLevel.ERROR})

    set_global_log_level(LogLevel.WARNING)

    assert a.level is LogLevel.WARNING
    assert b.level is LogLevel.WARNING
    assert c.level is LogLevel.WARNING


def test_repos_lists_registered_repositories(repo_name):
    new_package_logger(repo_name, "pkg")
    assert repo_name in registry.repos()


def test_set_formatter(restore_formatter):
    formatter = NullFormatter()
    set_formatter(formatter)
    assert get_formatter() is formatter
    assert registry.formatter is formatter
