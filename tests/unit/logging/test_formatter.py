import logging

from repolog.logging.entry import BaseLogEntry, LogEntry, render
from repolog.logging.formatter import Formatter, NullFormatter, StdlibFormatter
from repolog.logging.level import LogLevel
from repolog.logging.registry import new_package_logger, set_formatter


def test_formatters_satisfy_protocol():
    assert isinstance(NullFormatter(), Formatter)
    assert isinstance(StdlibFormatter(), Formatter)


def test_null_formatter_discards():
    formatter = NullFormatter()
    assert formatter.format("pkg", LogLevel.INFO, "msg") is None
    assert formatter.flush() is None


def test_base_log_entry_renders_unchanged():
    entry = BaseLogEntry("plain text")
    assert isinstance(entry, LogEntry)
    assert entry.log_string() == "plain text"
    assert render(entry) == "plain text"
    assert render(42) == "42"


def test_stdlib_formatter_forwards_records(caplog):
    formatter = StdlibFormatter(root="repolog-test")
    with caplog.at_level(5, logger="repolog-test"):
        formatter.format("storage", LogLevel.NOTICE, "disk ready")
        formatter.format("storage", LogLevel.TRACE, "fine detail")

    records = [r for r in caplog.records if r.name == "repolog-test.storage"]
    assert [r.getMessage() for r in records] == ["disk ready", "fine detail"]
    assert records[0].levelname == "NOTICE"
    assert records[0].repolog_level == "N"
    assert records[1].levelname == "TRACE"


def test_stdlib_formatter_flushes_handlers():
    flushed = []

    class FlushHandler(logging.Handler):
        def emit(self, record):
            pass

        def flush(self):
            flushed.append(True)

    formatter = StdlibFormatter(root="repolog-flush-test")
    handler = FlushHandler()
    formatter.root_logger.addHandler(handler)
    try:
        formatter.flush()
    finally:
        formatter.root_logger.removeHandler(handler)
    assert flushed


def test_package_logger_through_stdlib_formatter(repo_name, restore_formatter, caplog):
    set_formatter(StdlibFormatter(root="repolog-bridge"))
    logger = new_package_logger(repo_name, "bridge")
    with caplog.at_level(logging.DEBUG, logger="repolog-bridge"):
        logger.info("hello %s", "world")
        logger.debug("filtered by package level")

    messages = [r.getMessage() for r in caplog.records if r.name == "repolog-bridge.bridge"]
    assert messages == ["hello world"]
