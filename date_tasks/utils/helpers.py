"""
Utility Helper Functions for date_tasks

Common utility functions used throughout the project.
Python 3.9+ compatible.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from ..core.config_manager import ConfigManager


def to_utc(dt: datetime) -> datetime:
    """
    Express a datetime in UTC.

    Naive datetimes are taken to already be UTC wall-clock values.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def milliseconds(dt: datetime) -> int:
    """Millisecond field of a datetime (microseconds truncated)."""
    return dt.microsecond // 1000


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None,
                  config: Optional[ConfigManager] = None) -> logging.Logger:
    """
    Setup logging configuration for date_tasks.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR); read from
            the "logging" config when omitted
        log_file: Optional log file path
        config: Optional configuration manager

    Returns:
        Configured logger
    """
    config = config or ConfigManager()
    if log_level is None:
        log_level = config.get("logging", "level", "WARNING")

    numeric_level = getattr(logging, str(log_level).upper(), logging.INFO)

    formatter = logging.Formatter(
        config.get("logging", "format", '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    return root_logger
