"""Tests for decoder_ring.utils."""

import logging

import pytest

from decoder_ring.utils import configure_logging, get_logger, get_package_version

pytestmark = pytest.mark.unit


def test_get_logger_namespaced():
    assert get_logger("cli").name == "decoder_ring.cli"


def test_get_package_version():
    version = get_package_version()
    assert isinstance(version, str)
    assert version


def test_configure_logging_level(fresh_logging):
    configure_logging("WARN")
    assert fresh_logging.level == logging.WARNING
    assert len(fresh_logging.handlers) >= 1


def test_configure_logging_writes_file(fresh_logging, tmp_path):
    log_file = tmp_path / "logs" / "ring.log"
    configure_logging("DEBUG", log_file)
    get_logger("test").debug("hello from test")
    for handler in fresh_logging.handlers:
        handler.flush()
    assert "hello from test" in log_file.read_text()


def test_configure_logging_only_once(fresh_logging):
    configure_logging("ERROR")
    count = len(fresh_logging.handlers)
    configure_logging("DEBUG")
    assert len(fresh_logging.handlers) == count
    assert fresh_logging.level == logging.ERROR
