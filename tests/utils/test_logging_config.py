"""Tests for logging configuration."""

import logging

from moviehub.utils.logging_config import setup_logging


class TestSetupLogging:

    def teardown_method(self):
        for handler in logging.getLogger().handlers:
            handler.close()
        logging.getLogger().handlers.clear()

    def test_console_only(self):
        setup_logging(level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path):
        setup_logging(log_file="api.log", level="INFO", log_dir=str(tmp_path / "logs"))
        logging.getLogger("moviehub.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        log_text = (tmp_path / "logs" / "api.log").read_text()
        assert "hello from test" in log_text
        assert "moviehub.test - INFO" in log_text
