"""Tests for settings and logging setup."""

import logging

import pytest
import structlog

from py_chance.config import Settings
from py_chance.log import configure_logging


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("PY_CHANCE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("PY_CHANCE_LOG_JSON", raising=False)

        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("PY_CHANCE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PY_CHANCE_LOG_JSON", "false")

        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_json is False


class TestConfigureLogging:
    def test_json(self, reset_structlog):
        configure_logging(Settings(log_level="WARNING", log_json=True))

        config = structlog.get_config()
        assert structlog.is_configured()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        assert logging.getLogger().level == logging.WARNING

    def test_console(self, reset_structlog):
        configure_logging(Settings(log_level="debug", log_json=False))

        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.DEBUG
