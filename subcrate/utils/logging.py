"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
Subcrate package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import DEFAULT_LOG_LEVEL


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the Subcrate package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    if level is None:
        level = os.environ.get("SUBCRATE_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    log_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger("subcrate")
    logger.setLevel(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "subcrate" or name.startswith("subcrate."):
        return logging.getLogger(name)
    return logging.getLogger(f"subcrate.{name}")


class SubcrateLogger:
    """
    Domain-specific logging helpers.

    Wraps a module logger with methods for the events the naming and
    scaffolding pipeline reports.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_name_rejected(self, name: str, reason: str) -> None:
        """Log a name that failed validation."""
        self.logger.info(f"Rejected name {name!r}: {reason}")

    def log_advisory(self, name: str, message: str) -> None:
        """Log a non-fatal advisory about a validated name."""
        self.logger.info(f"{name}: {message}")

    def log_scaffold_created(self, name: str, path: str) -> None:
        """Log a successfully created package."""
        self.logger.info(f"Created package `{name}` at {path}")

    def log_rollback(self, path: str, reason: str) -> None:
        """
        Log removal of a partially written package.

        Args:
            path: Directory that was removed
            reason: Failure that triggered the rollback
        """
        self.logger.warning(f"Rolled back partially created package at {path}: {reason}")


setup_logging()
