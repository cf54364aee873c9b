from __future__ import annotations

import pytest
from pydantic import ValidationError

from py_decfmt.infrastructure.config.settings import BaseAppSettings, get_settings


def test_settings_test_profile_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    # Defaults: ENV=test, DEBUG, JSON_LOGS=False, separator '.'
    monkeypatch.delenv("LOGGING_ENABLED", raising=False)
    s = get_settings(ignore_env_file=True)
    assert s.env == "test"
    assert s.log_level.upper() == "DEBUG"
    assert s.json_logs is False
    assert s.logging_enabled is True
    assert s.decimal_point == "."
    assert s.log_rotation == "time"


def test_settings_prod_profile_defaults() -> None:
    s = get_settings(forced_env="production", ignore_env_file=True)
    assert s.env == "production"
    assert s.log_level.upper() == "INFO"
    assert s.json_logs is True


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "production")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("JSON_LOGS", "false")
    monkeypatch.setenv("DECIMAL_POINT", ",")
    s: BaseAppSettings = get_settings(ignore_env_file=True)
    assert s.env == "production"
    assert s.log_level.upper() == "WARNING"
    assert s.json_logs is False
    assert s.decimal_point == ","


def test_prefixed_env_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DECFMT__DECIMAL_POINT", ";")
    monkeypatch.setenv("DECFMT__LOG_LEVEL", "ERROR")
    s = get_settings(ignore_env_file=True)
    assert s.decimal_point == ";"
    assert s.log_level == "ERROR"


@pytest.mark.parametrize("bad", ["", "12", "0", "-"])
def test_invalid_decimal_point_rejected(monkeypatch: pytest.MonkeyPatch, bad: str) -> None:
    monkeypatch.setenv("DECIMAL_POINT", bad)
    with pytest.raises(ValidationError):
        get_settings(ignore_env_file=True)


def test_forced_env_switch(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENV", "production")
    s = get_settings(forced_env="test", ignore_env_file=True)
    assert s.env == "test"
    assert s.json_logs is False


def test_settings_cached() -> None:
    assert get_settings(ignore_env_file=True) is get_settings(ignore_env_file=True)
