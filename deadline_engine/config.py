"""Runtime configuration, logging setup and the clock."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Mapping, Optional

from deadline_engine.messages import DEFAULT_LOCALE, LOCALES
from deadline_engine.schema import DEFAULT_REMINDER_OFFSET, ReminderOffset

LOGGER_NAME = "deadline_engine"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_ENV_LOCALE = "DEADLINE_ENGINE_LOCALE"
_ENV_OFFSET = "DEADLINE_ENGINE_REMINDER_OFFSET"
_ENV_LOG_LEVEL = "DEADLINE_ENGINE_LOG_LEVEL"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class EngineConfig:
    locale: str = DEFAULT_LOCALE
    default_offset: ReminderOffset = DEFAULT_REMINDER_OFFSET
    log_level: str = "WARNING"


def load_config(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """Build the configuration from environment variables."""

    env = os.environ if environ is None else environ

    locale = env.get(_ENV_LOCALE, DEFAULT_LOCALE).strip()
    if locale not in LOCALES:
        raise ValueError(f"{_ENV_LOCALE}: unsupported locale '{locale}'")

    offset_raw = env.get(_ENV_OFFSET, DEFAULT_REMINDER_OFFSET.value).strip()
    try:
        default_offset = ReminderOffset(offset_raw)
    except ValueError as exc:
        raise ValueError(f"{_ENV_OFFSET}: invalid reminder offset '{offset_raw}'") from exc

    log_level = env.get(_ENV_LOG_LEVEL, "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"{_ENV_LOG_LEVEL}: invalid log level '{log_level}'")

    return EngineConfig(locale=locale, default_offset=default_offset, log_level=log_level)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach one stream handler to the package logger."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
