import logging

import pytest

from sparkles.config.settings import LOG_LEVEL, VERTICAL_BOUND_OFFSET, env_float, env_log_level
from sparkles.services.logging_service import configure_logging


def test_defaults():
    assert isinstance(VERTICAL_BOUND_OFFSET, float)
    assert LOG_LEVEL in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def test_env_float_override(monkeypatch):
    monkeypatch.setenv("SPARKLES_TEST_OFFSET", "2.5")
    assert env_float("SPARKLES_TEST_OFFSET", 10.0) == 2.5


def test_env_float_unset(monkeypatch):
    monkeypatch.delenv("SPARKLES_TEST_OFFSET", raising=False)
    assert env_float("SPARKLES_TEST_OFFSET", 10.0) == 10.0


@pytest.mark.parametrize("raw", ["ten", "", "nan", "inf"])
def test_env_float_invalid_falls_back(monkeypatch, caplog, raw):
    monkeypatch.setenv("SPARKLES_TEST_OFFSET", raw)
    with caplog.at_level(logging.WARNING, logger="sparkles.config.settings"):
        assert env_float("SPARKLES_TEST_OFFSET", 10.0) == 10.0
    assert "SPARKLES_TEST_OFFSET" in caplog.text


def test_env_log_level_normalized(monkeypatch):
    monkeypatch.setenv("SPARKLES_TEST_LEVEL", " debug ")
    assert env_log_level("SPARKLES_TEST_LEVEL", "WARNING") == "DEBUG"


def test_env_log_level_invalid_falls_back(monkeypatch):
    monkeypatch.setenv("SPARKLES_TEST_LEVEL", "LOUD")
    level = env_log_level("SPARKLES_TEST_LEVEL", "WARNING")
    assert level == "WARNING"
    assert configure_logging(level).level == logging.WARNING
