"""
Centralized logging configuration for pokesearch.
Provides consistent logging format and handlers across all modules.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Set, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers created through setup_logger, so set_level can reach all of them
_managed_loggers: Set[str] = set()


def _default_level() -> int:
    """Resolve the default level from POKESEARCH_LOG_LEVEL (WARNING if unset)."""
    name = os.getenv("POKESEARCH_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def setup_logger(
    name: str,
    level: Optional[int] = None,
    log_dir: Optional[Union[str, Path]] = None,
    console_output: bool = True,
    file_output: Optional[bool] = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure and return a logger with console and optional file handlers.

    Console output goes to stderr so that command output on stdout stays clean.

    Args:
        name: Logger name, typically __name__ of the calling module
        level: Logging level (default: POKESEARCH_LOG_LEVEL or WARNING)
        log_dir: Directory for log files (default: POKESEARCH_LOG_DIR)
        console_output: Enable console output
        file_output: Enable file output (default: only when a log dir is known)
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of backup files to keep

    Returns:
        Configured logger instance
    """
    if level is None:
        level = _default_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    _managed_loggers.add(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_dir is None:
        log_dir = os.getenv("POKESEARCH_LOG_DIR") or None
    if file_output is None:
        file_output = log_dir is not None

    # File handler with rotation
    if file_output:
        log_dir = Path(log_dir) if log_dir is not None else Path.cwd() / 'logs'
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f"{name.replace('.', '_')}_{datetime.now().strftime('%Y%m%d')}.log"

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def set_level(level: int) -> None:
    """
    Change the level of every logger created by setup_logger, and of its handlers.

    Args:
        level: New logging level
    """
    for name in _managed_loggers:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger configured specifically for testing.

    Args:
        name: Logger name

    Returns:
        Logger configured for testing with DEBUG level, console only
    """
    return setup_logger(
        name,
        level=logging.DEBUG,
        console_output=True,
        file_output=False
    )


def get_cli_logger() -> logging.Logger:
    """Get logger for the command-line entry point."""
    return setup_logger('pokesearch.cli')
