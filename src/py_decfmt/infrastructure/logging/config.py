from __future__ import annotations

import logging
import logging.handlers
import sys
from typing import IO, Any

import structlog

from py_decfmt.infrastructure.config.settings import BaseAppSettings, get_settings


def _resolve_level(level_name: str) -> int:
    """Return logging level from name, INFO when the name is unknown."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def _silence() -> None:
    logging.basicConfig(handlers=[], level=logging.CRITICAL, force=True)


def _file_handler(log_file: str, settings: BaseAppSettings) -> logging.Handler:
    """Rotating handler for LOG_FILE: by size or by time (midnight by default)."""
    if settings.log_rotation == "size":
        return logging.handlers.RotatingFileHandler(
            filename=log_file,
            maxBytes=max(1024, settings.log_max_bytes),
            backupCount=max(1, settings.log_backup_count),
            encoding="utf-8",
        )
    return logging.handlers.TimedRotatingFileHandler(
        filename=log_file,
        when=settings.log_rotate_when,
        interval=1,
        backupCount=max(1, settings.log_backup_count),
        utc=settings.log_rotate_utc,
        encoding="utf-8",
    )


def configure_logging(stream: IO[str] | None = None) -> None:
    """Set up structlog on top of stdlib logging.

    - JSON_LOGS selects JSONRenderer, otherwise the colored ConsoleRenderer
    - LOG_FILE (JSON mode only) writes through a rotating file handler
    - LOGGING_ENABLED=false drops every handler
    - Reconfiguration is forced so repeated calls never stack handlers

    stream: text stream for the console handler (defaults to sys.stdout).
    """
    settings = get_settings()
    if not settings.logging_enabled:
        _silence()
        # Route structlog to the silenced stdlib root so nothing reaches stdout
        structlog.configure(
            processors=[structlog.stdlib.filter_by_level, structlog.processors.KeyValueRenderer()],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,  # type: ignore[arg-type]
            cache_logger_on_first_use=True,
        )
        return

    timestamper = structlog.processors.TimeStamper(fmt="iso")
    shared: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
    ]
    renderer: structlog.types.Processor
    if settings.json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    if settings.json_logs and settings.log_file:
        handler = _file_handler(settings.log_file, settings)
    else:
        handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=shared)
    )
    logging.basicConfig(handlers=[handler], level=_resolve_level(settings.log_level), force=True)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,  # type: ignore[arg-type]
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "py_decfmt") -> structlog.stdlib.BoundLogger:
    """Return a structured logger, configuring logging on first use."""
    if not logging.getLogger().handlers and not structlog.is_configured():
        configure_logging()
    return structlog.get_logger(name)
