"""Logging configuration tests."""

import logging

from trajtheme.logging import get_logger, setup_logging


def test_get_logger_parents_under_package():
    assert get_logger("foo").name == "trajtheme.foo"
    assert get_logger("trajtheme.gui").name == "trajtheme.gui"


def test_warning_level_has_null_handler():
    setup_logging(level="WARNING")
    handlers = logging.getLogger("trajtheme").handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)


def test_debug_writes_log_file(tmp_path):
    log_file = tmp_path / "debug.log"
    setup_logging(level="DEBUG", log_file=str(log_file))
    get_logger(__name__).debug("hello from test")
    for handler in logging.getLogger("trajtheme").handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()
    setup_logging(level="WARNING")


def test_file_ignored_above_info(tmp_path):
    log_file = tmp_path / "warn.log"
    setup_logging(level="WARNING", log_file=str(log_file))
    assert not log_file.exists()
