"""Shared pytest configuration and fixtures for all tests."""

import importlib
import logging

import pytest

from decoder_ring.api.config.RingConfig import RingConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast in-process tests")
    config.addinivalue_line("markers", "smoke: run the installed entry point end to end")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/smoke/" in path_str:
            item.add_marker(pytest.mark.smoke)
        elif "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def ring_config() -> RingConfig:
    """Default configuration, as seen by a plain decoder-ring invocation."""
    return RingConfig.load("decoder-ring", environ={})


@pytest.fixture
def encoder_config() -> RingConfig:
    """Configuration as seen when invoked as encoder-ring."""
    return RingConfig.load("/usr/local/bin/encoder-ring", environ={})


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow configure_logging to run again; restore the package logger afterwards."""
    module = importlib.import_module("decoder_ring.utils.configure_logging")
    logger = logging.getLogger("decoder_ring")
    handlers = list(logger.handlers)
    level = logger.level
    monkeypatch.setattr(module, "_CONFIGURED", False)
    monkeypatch.delenv("DECODER_RING_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DECODER_RING_LOG_FILE", raising=False)
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
