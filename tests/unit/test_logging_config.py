"""Тесты для конфигурации structlog."""

import json
import logging

import pytest
import structlog

from bizdash.logging_config import add_log_level, configure_logging


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestAddLogLevel:
    """Тесты для add_log_level"""

    def test_upper_cases_method_name(self) -> None:
        assert add_log_level(None, "info", {})["level"] == "INFO"

    def test_warn_alias(self) -> None:
        assert add_log_level(None, "warn", {})["level"] == "WARNING"


class TestConfigureLogging:
    """Тесты для configure_logging"""

    def test_json_output(self, capsys) -> None:
        configure_logging("DEBUG", json_output=True)
        structlog.get_logger("bizdash.test").info("Series built", buckets=7)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "Series built"
        assert event["buckets"] == 7
        assert event["level"] == "INFO"
        assert "timestamp" in event

    def test_level_filters_events(self, capsys) -> None:
        configure_logging("WARNING", json_output=True)
        log = structlog.get_logger("bizdash.test")
        log.debug("hidden")
        log.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out

    def test_unknown_level_falls_back_to_info(self) -> None:
        configure_logging("LOUD")
        assert logging.getLogger().level == logging.INFO
