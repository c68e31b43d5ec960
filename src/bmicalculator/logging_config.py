"""
Logging Configuration
Sets up the package logger for the calculator window.
"""
import logging
import sys
from typing import Optional

# Every module logger (bmicalculator.app.state, ...) is a child of this one
PACKAGE_LOGGER: str = __package__ or "bmicalculator"

LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT: str = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the package logger and returns it.

    Args:
        level: Logging level (e.g. logging.DEBUG to see each calculation)
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Calling this twice (e.g. from tests) must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
