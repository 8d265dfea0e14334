# tests/test_config.py

from core.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV_VAR, get_log_level


def test_default_log_level(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)

    assert get_log_level() == DEFAULT_LOG_LEVEL


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "debug")

    assert get_log_level() == "DEBUG"
