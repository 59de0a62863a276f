"""Logging helpers shared by every primcrypt module."""

import logging

PACKAGE_LOGGER = 'primcrypt'


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for name.

    Records propagate to the root logger, so a plain basicConfig() in the
    application is enough to see them. While the root logger has no
    handlers the module logger is held at WARNING, which keeps the DEBUG
    traces of the primitives quiet by default.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)

    return logger


def setup_logging(level=logging.INFO):
    """
    Configure logging for primcrypt modules.

    Sets the level on the package logger and on every primcrypt module
    logger created so far, and makes sure they propagate to the root
    logger.

    Args:
        level: Logging level (default: logging.INFO)
    """
    names = [PACKAGE_LOGGER] + [
        name for name in logging.root.manager.loggerDict
        if name.startswith(PACKAGE_LOGGER + '.')
    ]
    for logger_name in names:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True
