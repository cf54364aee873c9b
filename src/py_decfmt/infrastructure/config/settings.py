from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["test", "production"]


def _prefixed(name: str) -> AliasChoices:
    return AliasChoices(f"DECFMT__{name}", name)


class BaseAppSettings(BaseSettings):
    """
    Common application settings.

    Loaded from ENV/.env with pydantic-settings.

    Holds:
    - Logging parameters (level, JSON, file and rotation)
    - Decimal separator for the presentation layer (DECIMAL_POINT)
    """

    model_config = SettingsConfigDict(env_file=(".env",), env_file_encoding="utf-8", extra="ignore")

    # Not bound to ENV directly; get_settings sets it from the selected profile
    env: EnvName = Field(default="test")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=False, validation_alias=_prefixed("JSON_LOGS"))
    logging_enabled: bool = Field(alias="LOGGING_ENABLED", default=True, validation_alias=_prefixed("LOGGING_ENABLED"))

    # Rotation options (used mainly when json_logs is true)
    log_file: str | None = Field(alias="LOG_FILE", default=None, validation_alias=_prefixed("LOG_FILE"))
    log_rotation: Literal["time", "size"] = Field(alias="LOG_ROTATION", default="time", validation_alias=_prefixed("LOG_ROTATION"))
    log_max_bytes: int = Field(alias="LOG_MAX_BYTES", default=10_485_760, validation_alias=_prefixed("LOG_MAX_BYTES"))
    log_backup_count: int = Field(alias="LOG_BACKUP_COUNT", default=7, validation_alias=_prefixed("LOG_BACKUP_COUNT"))
    log_rotate_when: str = Field(alias="LOG_ROTATE_WHEN", default="midnight", validation_alias=_prefixed("LOG_ROTATE_WHEN"))
    log_rotate_utc: bool = Field(alias="LOG_ROTATE_UTC", default=True, validation_alias=_prefixed("LOG_ROTATE_UTC"))

    # Presentation: separator substituted for '.' after formatting
    decimal_point: str = Field(alias="DECIMAL_POINT", default=".", validation_alias=_prefixed("DECIMAL_POINT"))

    @field_validator("decimal_point")
    @classmethod
    def validate_decimal_point(cls, v: str) -> str:
        """Single non-digit character other than the minus sign."""
        if len(v) != 1 or v.isdigit() or v == "-":
            raise ValueError("DECIMAL_POINT must be one character, not a digit or '-'")
        return v


class TestSettings(BaseAppSettings):
    """
    Test environment.

    - Verbose (DEBUG) human-readable logging
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    # Test defaults
    env: EnvName = Field(default="test")
    log_level: str = Field(alias="LOG_LEVEL", default="DEBUG", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=False, validation_alias=_prefixed("JSON_LOGS"))


class ProdSettings(BaseAppSettings):
    """
    Production environment.

    - INFO level, JSON logs by default
    """

    model_config = SettingsConfigDict(env_prefix="", extra="ignore")

    env: EnvName = Field(default="production")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO", validation_alias=_prefixed("LOG_LEVEL"))
    json_logs: bool = Field(alias="JSON_LOGS", default=True, validation_alias=_prefixed("JSON_LOGS"))


# Profiles that skip .env, for isolated profile tests
class TestSettingsNoFile(TestSettings):
    model_config = SettingsConfigDict(env_file=(), extra="ignore")


class ProdSettingsNoFile(ProdSettings):
    model_config = SettingsConfigDict(env_file=(), extra="ignore")


@lru_cache(maxsize=8)
def get_settings(forced_env: EnvName | None = None, *, ignore_env_file: bool = False) -> BaseAppSettings:
    """
    Cached settings factory driven by ENV.

    Parameters:
    - forced_env: Explicit profile ("test" or "production"), overrides ENV.
    - ignore_env_file: Skip reading .env (uses the *NoFile classes).

    Returns:
    - Settings instance for the selected environment.
    """
    import os

    selector: EnvName = forced_env or os.getenv("ENV", "test")  # type: ignore[assignment]
    if selector == "production":
        cls = ProdSettingsNoFile if ignore_env_file else ProdSettings
    else:
        cls = TestSettingsNoFile if ignore_env_file else TestSettings

    instance = cls()
    instance.env = selector  # keep env in line with the selected profile
    return instance
