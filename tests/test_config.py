"""
Unit tests for settings and logging setup.

Run with: pytest tests/test_config.py -v
"""

import importlib
import logging

import pytest

from organizer_companion.config import setup_logging
from organizer_companion.config import settings


@pytest.fixture()
def restore_logging():
    """Remove handlers added by setup_logging after the test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    root_level = root.level
    package_level = logging.getLogger("organizer_companion").level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(root_level)
    logging.getLogger("organizer_companion").setLevel(package_level)


class TestConfig:
    """Test environment-driven settings."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("USE_UTC_CLOCK", "off")
        monkeypatch.setenv("JSON_INDENT", "4")
        monkeypatch.setenv("LOG_FILE", "")

        reloaded = importlib.reload(settings)

        assert reloaded.Config.LOG_LEVEL == "DEBUG"
        assert reloaded.Config.USE_UTC_CLOCK is False
        assert reloaded.Config.JSON_INDENT == 4
        assert reloaded.Config.LOG_FILE is None

        monkeypatch.undo()
        importlib.reload(settings)

    def test_zero_indent_means_compact(self, monkeypatch):
        monkeypatch.setenv("JSON_INDENT", "0")

        reloaded = importlib.reload(settings)

        assert reloaded.Config.JSON_INDENT is None

        monkeypatch.undo()
        importlib.reload(settings)


class TestLogging:
    """Test setup_logging."""

    def test_sets_package_level(self, restore_logging):
        root = setup_logging(level="DEBUG")

        assert root is logging.getLogger()
        assert root.level == logging.WARNING
        assert logging.getLogger("organizer_companion").level == logging.DEBUG

    def test_file_handler_written(self, restore_logging, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        setup_logging(level="INFO", log_file=str(log_file))
        logging.getLogger("organizer_companion.tests").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text()

    def test_formatter_tolerates_missing_entity_type(self):
        from organizer_companion.config.logging_config import SafeFormatter

        formatter = SafeFormatter("%(entity_type)s %(message)s")
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        assert formatter.format(record) == "- msg"
