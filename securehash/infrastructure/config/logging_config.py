"""Logging setup for applications embedding the hasher."""

import logging

from securehash.infrastructure.config.settings import Settings, get_settings

PACKAGE_LOGGER = "securehash"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """
    Apply the configured log level to the package logger.

    Library modules only create loggers; handlers belong to the embedding
    application. A NullHandler is attached so an unconfigured application
    does not print "no handler" warnings.

    Args:
        settings: Settings to read log_level from (defaults to get_settings())

    Returns:
        The package logger
    """
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(settings.log_level)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
