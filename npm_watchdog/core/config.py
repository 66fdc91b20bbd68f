"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

_ENV_LOG_LEVEL = "NPM_WATCHDOG_LOG_LEVEL"
_ENV_LOG_FORMAT = "NPM_WATCHDOG_LOG_FORMAT"
_ENV_LANG = "NPM_WATCHDOG_LANG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("console", "json")


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    log_format: str = "console"  # "console" | "json"
    lang: str = "en"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from ``NPM_WATCHDOG_*`` variables.

        Unknown log levels fall back to ``WARNING`` and unknown formats to
        ``console``; the language code is passed through and validated by the
        presentation layer.
        """
        env = os.environ if environ is None else environ
        log_level = env.get(_ENV_LOG_LEVEL, cls.log_level).strip().upper()
        if log_level not in LOG_LEVELS:
            log_level = cls.log_level
        log_format = env.get(_ENV_LOG_FORMAT, cls.log_format).strip().lower()
        if log_format not in LOG_FORMATS:
            log_format = cls.log_format
        return cls(
            log_level=log_level,
            log_format=log_format,
            lang=env.get(_ENV_LANG, cls.lang).lower(),
        )
