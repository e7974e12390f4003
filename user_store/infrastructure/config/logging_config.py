"""Logging setup for the user_store logger hierarchy."""

import logging

from user_store.infrastructure.config.settings import Settings

LOGGER_NAME = "user_store"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Module-level singleton (created once, reused on every configure call)
_handler: logging.Handler | None = None


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply ``settings.log_level`` to the package loggers.

    Attaches one stream handler to the ``user_store`` logger and stops
    propagation to the root logger, so records are not printed twice when
    the host application configures root logging too. Calling it again
    only updates the level.

    Args:
        settings: Settings carrying ``log_level``

    Returns:
        The configured package logger
    """
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)
    logger.propagate = False

    if _handler not in logger.handlers:
        logger.addHandler(_handler)

    return logger
