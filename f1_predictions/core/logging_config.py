"""
Logging configuration for the scoring engine

The library only creates module loggers; applications call setup_logging()
once at startup to get console output.
"""

import logging
from typing import Optional

from f1_predictions.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger with a single console handler.

    Args:
        level: Level name (DEBUG, INFO, ...). Defaults to settings.log_level.

    Returns:
        The package logger.
    """
    level_name = (level or get_settings().log_level).upper()
    log_level = getattr(logging, level_name, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    package_logger = logging.getLogger("f1_predictions")
    package_logger.debug("Logging configured at %s", level_name)
    return package_logger
