"""Logging setup for the cartesian package."""

import logging
import sys

from cartesian.shared.config.settings import Settings

LOGGER_NAME = "cartesian"

_console_handler: logging.Handler | None = None


def configure_logging(settings: Settings, level: str | None = None) -> logging.Logger:
    """Configure the package logger from settings.

    Installs a single stdout handler on the ``cartesian`` logger, leaving the
    root logger untouched. Calling it again replaces the handler rather than
    adding another one.

    Args:
        settings: Application settings
        level: Optional level overriding ``settings.logging.level``

    Returns:
        The configured package logger
    """
    global _console_handler

    logger = logging.getLogger(LOGGER_NAME)
    if _console_handler is not None:
        logger.removeHandler(_console_handler)
        _console_handler = None

    if level is None and settings.debug:
        level = "DEBUG"
    logger.setLevel((level or settings.logging.level).upper())

    if settings.logging.console_enabled:
        _console_handler = logging.StreamHandler(sys.stdout)
        _console_handler.setFormatter(logging.Formatter(settings.logging.format))
        logger.addHandler(_console_handler)
    return logger
