"""Tests for logging configuration."""

import logging

import pytest

from grayraster.utils.logging_config import LOG_FILE_NAME, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Fixture restoring the root logger after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_level_name():
    """Test log levels may be given by name."""
    setup_logging(log_level="debug")
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_file(tmp_path):
    """Test a log file is created in the requested directory."""
    log_dir = tmp_path / "logs"
    setup_logging(log_dir=log_dir, log_level=logging.INFO)

    logging.getLogger("grayraster.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "hello" in (log_dir / LOG_FILE_NAME).read_text()


def test_setup_logging_unknown_level():
    """Test an unknown level name is rejected."""
    with pytest.raises(ValueError):
        setup_logging(log_level="LOUD")
