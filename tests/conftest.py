from __future__ import annotations

from collections.abc import Iterator

import pytest

from py_decfmt.infrastructure.config.settings import get_settings
from py_decfmt.infrastructure.logging.config import configure_logging

_ENV_KEYS = (
    "ENV",
    "LOG_LEVEL",
    "JSON_LOGS",
    "LOGGING_ENABLED",
    "LOG_FILE",
    "LOG_ROTATION",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
    "DECIMAL_POINT",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clean settings cache/env and keep logging silent unless a test opts in."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
        monkeypatch.delenv(f"DECFMT__{key}", raising=False)
    monkeypatch.setenv("LOGGING_ENABLED", "false")
    get_settings.cache_clear()
    configure_logging()
    yield
    get_settings.cache_clear()
