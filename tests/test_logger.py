"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from rich.logging import RichHandler

from highlightkit.utils import LogConfig, setup_logging


class TestSetupLogging:
    def test_console_handler(self):
        logger = setup_logging()
        assert logger.name == "highlightkit"
        assert logger.level == logging.WARNING
        assert [type(h) for h in logger.handlers] == [RichHandler]

    def test_verbose_enables_debug(self):
        logger = setup_logging(verbose=True)
        assert logger.level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        config = LogConfig(log_dir=tmp_path / "logs", enable_file=True, enable_console=False)
        logger = setup_logging(config=config)

        (handler,) = logger.handlers
        assert isinstance(handler, RotatingFileHandler)
        logger.warning("written to file")
        handler.flush()
        handler.close()
        assert "written to file" in (tmp_path / "logs" / "highlightkit.log").read_text()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
