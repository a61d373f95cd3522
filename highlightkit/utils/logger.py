"""
Logging Utilities for HighlightKit
===================================
Rich console logging with optional rotating file output.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


# Default log directory
DEFAULT_LOG_DIR = Path.home() / ".highlightkit" / "logs"

# Log format strings
CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEBUG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(funcName)s | %(message)s"


class LogConfig:
    """Logging configuration"""

    def __init__(
        self,
        level: int = logging.WARNING,
        log_dir: Optional[Path] = None,
        enable_file: bool = False,
        enable_console: bool = True,
        max_file_size: int = 1024 * 1024,  # 1MB
        backup_count: int = 3,
        debug_mode: bool = False
    ):
        self.level = level
        self.log_dir = log_dir or DEFAULT_LOG_DIR
        self.enable_file = enable_file
        self.enable_console = enable_console
        self.max_file_size = max_file_size
        self.backup_count = backup_count
        self.debug_mode = debug_mode


def setup_logging(
    name: str = "highlightkit",
    config: Optional[LogConfig] = None,
    verbose: bool = False
) -> logging.Logger:
    """
    Set up logging for the package.

    Args:
        name: Logger name
        config: Logging configuration
        verbose: Enable verbose/debug output

    Returns:
        Configured logger
    """
    config = config or LogConfig()

    if verbose:
        config.level = logging.DEBUG
        config.debug_mode = True

    logger = logging.getLogger(name)
    logger.setLevel(config.level)

    # Clear existing handlers
    logger.handlers.clear()

    if config.enable_console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            show_time=config.debug_mode,
            show_path=config.debug_mode,
            rich_tracebacks=True,
            markup=False
        )
        console_handler.setLevel(config.level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    if config.enable_file:
        try:
            config.log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                config.log_dir / f"{name}.log",
                maxBytes=config.max_file_size,
                backupCount=config.backup_count,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)

            file_format = DEBUG_FORMAT if config.debug_mode else FILE_FORMAT
            file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))

            logger.addHandler(file_handler)
        except OSError as e:
            # Can't log to file, just use console
            logger.warning(f"Failed to set up file logging: {e}")

    return logger


__all__ = [
    'setup_logging',
    'LogConfig',
    'DEFAULT_LOG_DIR',
]
