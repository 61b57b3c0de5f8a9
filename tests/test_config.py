"""Tests for the config and logging modules."""

import importlib
import json
import logging

import pytest

from camp_grocery import config
from camp_grocery.logging_config import (
    ConsoleFormatter,
    JsonFormatter,
    configure_logging,
    get_logger,
)


@pytest.fixture
def reload_config(monkeypatch):
    """Reload config after changing the environment, and restore it afterwards."""
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(config)


class TestConfig:
    def test_defaults(self, reload_config):
        reload_config.delenv("CAMP_GROCERY_HOME", raising=False)
        reload_config.delenv("CAMP_GROCERY_HTTP_TIMEOUT", raising=False)
        importlib.reload(config)

        assert config.CONFIG_DIR.name == ".camp-grocery"
        assert config.PANTRY_FILE == config.CONFIG_DIR / "pantry.json"
        assert config.HTTP_TIMEOUT == 30.0

    def test_environment_overrides(self, reload_config, tmp_path):
        reload_config.setenv("CAMP_GROCERY_HOME", str(tmp_path))
        reload_config.setenv("CAMP_GROCERY_HTTP_TIMEOUT", "5")
        reload_config.setenv("CAMP_GROCERY_LOG_LEVEL", "DEBUG")
        importlib.reload(config)

        assert config.PANTRY_FILE == tmp_path / "pantry.json"
        assert config.HTTP_TIMEOUT == 5.0
        assert config.LOG_LEVEL == "DEBUG"


def make_record(message: str) -> logging.LogRecord:
    return logging.LogRecord("camp_grocery.merger", logging.INFO, __file__, 1, message, (), None)


class TestLogging:
    def test_json_formatter(self):
        data = json.loads(JsonFormatter().format(make_record("Merged 3 mention(s)")))

        assert data["level"] == "INFO"
        assert data["logger"] == "camp_grocery.merger"
        assert data["message"] == "Merged 3 mention(s)"

    def test_console_formatter(self):
        line = ConsoleFormatter().format(make_record("Merged 3 mention(s)"))
        assert line.endswith("| INFO     | camp_grocery.merger | Merged 3 mention(s)")

    def test_configure_logging(self):
        configure_logging("debug", json_format=True)

        package_logger = logging.getLogger("camp_grocery")
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0].formatter, JsonFormatter)

    def test_configure_logging_twice_keeps_one_handler(self):
        configure_logging("INFO")
        configure_logging("WARNING")

        package_logger = logging.getLogger("camp_grocery")
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_log_format_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        configure_logging()

        handler = logging.getLogger("camp_grocery").handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)

    def test_get_logger(self):
        assert get_logger("camp_grocery.pantry").name == "camp_grocery.pantry"
