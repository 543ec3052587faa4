"""
Logging utilities
Application-wide logger setup
"""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _default_level() -> int:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def setup_logger(name: str = __name__, level: int | None = None) -> logging.Logger:
    """
    Configure and return a logger

    Args:
        name: logger name
        level: logging level (defaults to LOG_LEVEL from the environment)

    Returns:
        Configured Logger instance
    """
    if level is None:
        level = _default_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Already configured, don't add a second handler
    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    logger.addHandler(console_handler)

    return logger
