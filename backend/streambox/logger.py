"""Logging setup shared by every streambox module."""

import logging
import sys

from streambox.config import Settings, settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_level(config: Settings) -> int:
    """DEBUG when the app runs in debug mode, INFO otherwise."""
    return logging.DEBUG if config.debug else logging.INFO


logging.basicConfig(
    level=log_level(settings),
    format=LOG_FORMAT,
    handlers=[logging.StreamHandler(sys.stdout)],
)


def get_logger(name: str, config: Settings = settings) -> logging.Logger:
    """
    Get a named logger at the level configured for the app.

    Args:
        name: Logger name
        config: Settings whose ``debug`` flag picks the level

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level(config))
    return logger


app_logger = get_logger("app")
api_logger = get_logger("api")
catalog_logger = get_logger("catalog")
db_logger = get_logger("database")
auth_logger = get_logger("auth")
