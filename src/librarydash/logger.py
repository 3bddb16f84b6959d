"""Logging configuration for librarydash.

Sets up console logging for the ``librarydash`` logger.
"""

import logging

LOGGER_NAME = "librarydash"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Set up application logging with a console handler.

    Args:
        level: Log level name (e.g., "DEBUG", "INFO")

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())

    # Clear any existing handlers (in case this is called multiple times)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level.upper())
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger.

    Returns:
        The librarydash logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
