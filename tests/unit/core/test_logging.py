"""
Unit Tests for Centralized Logging.

Tests the logging configuration, handlers, and source handling.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from unittest.mock import MagicMock

import pytest

from ntc_booking.core import logging as logging_module
from ntc_booking.core.logging import VALID_SOURCES, get_logger, log_with_source, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if isinstance(handler, RotatingFileHandler):
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestValidSources:
    """Tests for VALID_SOURCES constant."""

    def test_contains_cli_and_storage(self):
        assert "cli" in VALID_SOURCES
        assert "storage" in VALID_SOURCES

    def test_is_frozenset(self):
        assert isinstance(VALID_SOURCES, frozenset)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_uses_level_from_yaml_by_default(self):
        setup_logging()
        assert logging.getLogger().level == logging.ERROR

    def test_level_override(self):
        setup_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_console_handler_writes_to_stderr(self):
        setup_logging(level="INFO")
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert handlers[0].stream is sys.stderr

    def test_console_can_be_disabled(self):
        setup_logging(enable_console=False)
        assert logging.getLogger().handlers == []

    def test_file_logging_creates_directory(self, tmp_path, monkeypatch):
        log_path = tmp_path / "logs" / "system.jsonl"
        monkeypatch.setattr(logging_module, "_resolve_log_path", lambda configured: log_path)

        setup_logging(enable_console=False, enable_file_logging=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert log_path.parent.is_dir()

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1


class TestResolveLogPath:
    """Tests for log path resolution."""

    def test_relative_path_resolves_against_project_root(self):
        from ntc_booking.core.config import find_project_root

        assert logging_module._resolve_log_path("logs/system.jsonl") == find_project_root() / "logs" / "system.jsonl"

    def test_absolute_path_is_kept(self, tmp_path):
        assert logging_module._resolve_log_path(str(tmp_path / "x.jsonl")) == tmp_path / "x.jsonl"


class TestLogWithSource:
    """Tests for log_with_source."""

    def test_passes_source_and_context(self):
        logger = MagicMock()
        log_with_source(logger, "cli", "info", "API request", path="/schedules")
        logger.info.assert_called_once_with("API request", source="cli", path="/schedules")

    def test_level_is_case_insensitive(self):
        logger = MagicMock()
        log_with_source(logger, "storage", "WARNING", "Session file unreadable")
        logger.warning.assert_called_once()

    def test_get_logger_returns_usable_logger(self):
        logger = get_logger(__name__)
        assert hasattr(logger, "info")
