"""Tests for sv/utils."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from sv.utils import configure_logging as configure_logging_module
from sv.utils import get_logger, get_package_version
from sv.utils.configure_logging import configure_logging


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow configure_logging to run again and drop handlers it added."""
    monkeypatch.setattr(configure_logging_module, "_CONFIGURED", False)
    logger = logging.getLogger("sv")
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in before:
            handler.close()
    logger.handlers = before
    logger.setLevel(level)


def test_get_logger_namespace():
    assert get_logger("rpc").name == "sv.rpc"


def test_get_package_version_is_string():
    version = get_package_version()
    assert isinstance(version, str)
    assert version
    assert get_package_version() == version


def test_configure_logging_stderr(fresh_logging):
    configure_logging("INFO")
    assert fresh_logging.level == logging.INFO
    assert any(isinstance(h, logging.StreamHandler) for h in fresh_logging.handlers)
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_configure_logging_file(fresh_logging, tmp_path):
    log_file = tmp_path / "logs" / "sv.log"
    configure_logging(logging.DEBUG, log_file)

    get_logger("test").debug("hello file")
    for handler in fresh_logging.handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in fresh_logging.handlers)
    assert "sv.test - DEBUG - hello file" in log_file.read_text()


def test_configure_logging_only_once(fresh_logging):
    configure_logging("INFO")
    count = len(fresh_logging.handlers)
    configure_logging("DEBUG")
    assert len(fresh_logging.handlers) == count
    assert fresh_logging.level == logging.INFO
