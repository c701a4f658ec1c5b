"""Logging configuration for wordpick using loguru."""

import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}"


def setup_logger(
    log_file: Optional[Union[str, Path]] = None,
    log_level: str = "WARNING",
    rotation: str = "10 MB",
    retention: str = "7 days",
    console_output: bool = False,
) -> None:
    """
    Configure loguru sinks.

    The default stderr sink is always removed: while the picker runs, the
    terminal belongs to curses and stray log lines would corrupt the screen.

    Args:
        log_file: Path to the log file (no file sink if None)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        console_output: Also log to stderr (only safe outside the TUI)
    """
    logger.remove()
    # Unbound records fall back to the package name in {extra[name]}
    logger.configure(extra={"name": "wordpick"})

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if log_file is not None:
        logger.add(
            str(log_file),
            level=log_level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            encoding="utf-8",
        )


def get_logger(name: Optional[str] = None):
    """
    Get a logger instance, optionally bound to a name.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger
