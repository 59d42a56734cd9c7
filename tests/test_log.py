"""
Tests for logging setup.

pytest attaches its capture handlers to the root logger for each test
phase, so root handlers are cleared inside the test body.
"""

import contextlib
import logging

import pytest

from tkcompose import configure_logging, setup_logging
from tkcompose.log import resolve_log_level_name


@contextlib.contextmanager
def no_root_handlers():
    root = logging.getLogger()
    saved = root.handlers[:]
    root.handlers.clear()
    try:
        yield root
    finally:
        root.handlers[:] = saved


@pytest.fixture
def package_logger(monkeypatch):
    """The tkcompose logger with no handlers, restored afterwards."""
    logger = logging.getLogger("tkcompose")
    monkeypatch.setattr(logger, "handlers", [])
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestResolveLevel:

    def test_default(self, monkeypatch):
        monkeypatch.delenv("TKCOMPOSE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        assert resolve_log_level_name() == "INFO"

    def test_package_variable_wins(self, monkeypatch):
        monkeypatch.setenv("TKCOMPOSE_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert resolve_log_level_name() == "DEBUG"


class TestSetupLogging:

    def test_installs_handler_when_unconfigured(self, package_logger, monkeypatch):
        monkeypatch.delenv("TKCOMPOSE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        with no_root_handlers():
            setup_logging()
        assert len(package_logger.handlers) == 1
        assert package_logger.isEnabledFor(logging.INFO)

    def test_leaves_existing_configuration(self, package_logger):
        with no_root_handlers() as root:
            root.addHandler(logging.NullHandler())
            setup_logging()
        assert package_logger.handlers == []

    def test_configure_logging_is_idempotent(self, package_logger):
        configure_logging("WARNING")
        configure_logging("DEBUG")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG
