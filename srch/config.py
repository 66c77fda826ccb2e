"""Runtime configuration read from ``SRCH_*`` environment variables."""

import logging
import os
from dataclasses import dataclass, field

from srch.models import MODES, Mode


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes")


def _env_mode(key: str, default: Mode) -> Mode:
    value = os.getenv(key)
    if not value:
        return default
    value = value.lower()
    if value not in MODES:
        raise ValueError(f"{key} must be one of {list(MODES)}, got {value!r}")
    return value  # type: ignore[return-value]


def _env_log_level(key: str, default: str) -> str:
    value = os.getenv(key, default).upper()
    if not isinstance(logging.getLevelName(value), int):
        raise ValueError(f"{key} is not a valid log level: {value!r}")
    return value


@dataclass(frozen=True)
class SrchConfig:
    """Defaults for the srch command line.

    All settings can be overridden via environment variables with
    the prefix SRCH_. Explicit command line options always win.
    """

    mode: Mode = field(default_factory=lambda: _env_mode("SRCH_MODE", "line"))
    json: bool = field(default_factory=lambda: _env_bool("SRCH_JSON", False))
    log_level: str = field(default_factory=lambda: _env_log_level("SRCH_LOG_LEVEL", "WARNING"))
