"""Tests for log level selection."""

import pytest

from torrow_mcp.logging_config import LOG_LEVEL_ENV, _level, configure_logging


def test_default_level_is_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert _level(False) == "INFO"


def test_env_level_is_used(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, " warning ")
    assert _level(False) == "WARNING"


def test_verbose_overrides_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
    assert _level(True) == "DEBUG"


def test_unknown_env_level_falls_back_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, "loud")
    assert _level(False) == "INFO"
    configure_logging()
