"""
Unit tests for logging configuration.
"""

import logging

import pytest

from movie_catalog.utils.logging_config import configure_api_logging, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestLoggingConfig:
    """Tests for setup_logging and helpers."""

    def test_console_only(self):
        setup_logging(level="WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path):
        setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path / "logs"))
        logging.getLogger("movie_catalog.test").info("hello")
        assert (tmp_path / "logs" / "api.log").exists()
        assert len(logging.getLogger().handlers) == 2

    def test_configure_api_logging_reads_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "error")
        monkeypatch.delenv("LOG_FILE", raising=False)
        configure_api_logging()
        assert logging.getLogger().level == logging.ERROR
