"""
Tests for environment settings (core/config.py) and logger setup
(core/logger.py).
"""

import io
import logging

import pytest

from core.config import (
    DEFAULT_API_BASE,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_BASE_DELAY_MS,
    DEFAULT_TIMEOUT_SECONDS,
    Settings,
    load_settings,
)
from core.errors import ConfigurationError
from core.logger import LOGGER_NAME, build_logger


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings({})

        assert settings == Settings()
        assert settings.api_base == DEFAULT_API_BASE
        assert settings.debug is False
        assert settings.max_retries == DEFAULT_MAX_RETRIES
        assert settings.retry_base_delay_ms == DEFAULT_RETRY_BASE_DELAY_MS
        assert settings.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
        assert settings.enabled_tools is None

    def test_overrides(self):
        settings = load_settings({
            "AIFAIS_API_BASE": "http://localhost:3000/api/v1",
            "DEBUG": "true",
            "AIFAIS_MAX_RETRIES": "5",
            "AIFAIS_RETRY_BASE_DELAY_MS": "250",
            "AIFAIS_TIMEOUT_SECONDS": "15.5",
            "AIFAIS_TOOLS": "scan_invoice, btw_calculator",
        })

        assert settings.api_base == "http://localhost:3000/api/v1"
        assert settings.debug is True
        assert settings.max_retries == 5
        assert settings.retry_base_delay_ms == 250
        assert settings.timeout_seconds == 15.5
        assert settings.enabled_tools == ("scan_invoice", "btw_calculator")

    @pytest.mark.parametrize("value, expected", [("TRUE", True), ("false", False), ("1", False), ("", False)])
    def test_debug_flag(self, value, expected):
        assert load_settings({"DEBUG": value}).debug is expected

    def test_empty_base_falls_back(self):
        assert load_settings({"AIFAIS_API_BASE": ""}).api_base == DEFAULT_API_BASE

    @pytest.mark.parametrize(
        "env",
        [
            {"AIFAIS_MAX_RETRIES": "three"},
            {"AIFAIS_MAX_RETRIES": "0"},
            {"AIFAIS_RETRY_BASE_DELAY_MS": "-1"},
            {"AIFAIS_TIMEOUT_SECONDS": "soon"},
            {"AIFAIS_TIMEOUT_SECONDS": "0"},
        ],
    )
    def test_invalid_numbers(self, env):
        with pytest.raises(ConfigurationError):
            load_settings(env)

    def test_unknown_tool_name(self):
        with pytest.raises(ConfigurationError, match="bogus"):
            load_settings({"AIFAIS_TOOLS": "scan_invoice,bogus"})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("AIFAIS_API_BASE", "http://env.test")
        assert load_settings().api_base == "http://env.test"


class TestBuildLogger:
    def test_info_level_by_default(self):
        logger = build_logger(stream=io.StringIO())
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.INFO
        assert logger.propagate is False

    def test_debug_level(self):
        assert build_logger(debug=True, stream=io.StringIO()).level == logging.DEBUG

    def test_writes_formatted_lines(self):
        stream = io.StringIO()
        logger = build_logger(stream=stream)

        logger.info("Tool call: scan_invoice")
        logger.debug("hidden")

        output = stream.getvalue()
        assert "[INFO] Tool call: scan_invoice" in output
        assert "hidden" not in output

    def test_rebuilding_does_not_duplicate_handlers(self):
        build_logger(stream=io.StringIO())
        logger = build_logger(stream=io.StringIO())
        assert len(logger.handlers) == 1
