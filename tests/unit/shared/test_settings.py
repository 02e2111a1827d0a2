"""Tests for settings and logging setup."""

import logging

import pytest

from cartesian.shared.config.settings import Settings, get_settings
from cartesian.shared.logging import LOGGER_NAME, configure_logging


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DISPLAY_PRECISION", raising=False)
    settings = Settings(_env_file=None)
    assert settings.app_name == "Cartesian"
    assert settings.logging.level == "WARNING"
    assert settings.display.precision == 6


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DISPLAY_PRECISION", "3")
    settings = Settings(_env_file=None)
    assert settings.logging.level == "DEBUG"
    assert settings.display.precision == 3
    assert settings.as_dict()["display.precision"] == 3


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_configure_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    settings = Settings(_env_file=None)
    logger = configure_logging(settings)
    installed = len(logger.handlers)

    configure_logging(settings, "debug")
    assert len(logger.handlers) == installed
    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.level == logging.DEBUG

    configure_logging(settings)
    assert logger.level == logging.WARNING
