"""
Tests for environment-driven logger configuration.
"""

import io
import logging

import pytest
from terrakit_core.config import LoggingConfig, new_level_logger_from_env
from terrakit_core.log import LogFlags, Severity


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("TERRAKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TERRAKIT_LOG_FLAGS", raising=False)


class TestLoggingConfig:
    def test_defaults(self):
        cfg = LoggingConfig.from_env()
        assert cfg.level is Severity.INFO
        assert cfg.flags == LogFlags.STD

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TERRAKIT_LOG_LEVEL", "trace")
        monkeypatch.setenv("TERRAKIT_LOG_FLAGS", "none")
        cfg = LoggingConfig.from_env()
        assert cfg.level is Severity.TRACE
        assert cfg.flags == LogFlags.NONE

    def test_invalid_level_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("TERRAKIT_LOG_LEVEL", " debug")
        with caplog.at_level(logging.WARNING, logger="terrakit.config"):
            cfg = LoggingConfig.from_env()
        assert cfg.level is Severity.INFO
        assert any("TERRAKIT_LOG_LEVEL" in r.getMessage() for r in caplog.records)

    def test_invalid_flags_fall_back(self, monkeypatch, caplog):
        monkeypatch.setenv("TERRAKIT_LOG_FLAGS", "date,bogus")
        with caplog.at_level(logging.WARNING, logger="terrakit.config"):
            cfg = LoggingConfig.from_env()
        assert cfg.flags == LogFlags.STD
        assert any("TERRAKIT_LOG_FLAGS" in r.getMessage() for r in caplog.records)


class TestNewLevelLoggerFromEnv:
    def test_uses_env_threshold_and_flags(self, monkeypatch):
        monkeypatch.setenv("TERRAKIT_LOG_LEVEL", "WARNING")
        monkeypatch.setenv("TERRAKIT_LOG_FLAGS", "none")
        buffer = io.StringIO()
        logger = new_level_logger_from_env(buffer)

        logger.info("quiet")
        logger.warning("loud")

        assert logger.threshold is Severity.WARNING
        assert buffer.getvalue() == "[WARNING] loud\n"
