"""Structured logging configuration — structlog + stdlib logging."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

import structlog

from npm_watchdog.core.config import LOG_LEVELS, Settings


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors shared by structlog events and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _stderr_config(
    level: str, pre_chain: list, renderer: structlog.types.Processor
) -> dict[str, Any]:
    """dictConfig routing every record through one stderr handler."""
    formatter = {
        "()": structlog.stdlib.ProcessorFormatter,
        "foreign_pre_chain": pre_chain,
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"structlog": formatter},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "structlog",
            },
        },
        "root": {"handlers": ["stderr"], "level": level},
        "loggers": {"npm_watchdog": {"level": level}},
    }


def setup_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Configure structlog and stdlib logging for one CLI run.

    Defaults come from :meth:`Settings.from_env`; explicit arguments win, but an
    unknown level name falls back to the environment setting. Output goes to
    stderr so stdout stays free for the report.
    """
    settings = Settings.from_env()
    log_level = (level or settings.log_level).upper()
    if log_level not in LOG_LEVELS:
        log_level = settings.log_level
    pre_chain = _pre_chain()

    # Not cached: repeated in-process runs must pick up a fresh configuration.
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    logging.config.dictConfig(
        _stderr_config(log_level, pre_chain, _renderer((fmt or settings.log_format).lower()))
    )
