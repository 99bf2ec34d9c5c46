"""Environment driven settings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .stats import DEFAULT_LEAGUE


logger = logging.getLogger(__name__)

_LEAGUE_ENV = "TAKETRACKER_LEAGUE"
_CATALOG_PATH_ENV = "TAKETRACKER_CATALOG_PATH"
_ESPN_TIMEOUT_ENV = "TAKETRACKER_ESPN_TIMEOUT"
_ESPN_RETRIES_ENV = "TAKETRACKER_ESPN_RETRIES"

_ESPN_TIMEOUT_DEFAULT = 10.0
_ESPN_RETRIES_DEFAULT = 3

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "catalog.json"


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def league() -> str:
    return os.getenv(_LEAGUE_ENV) or DEFAULT_LEAGUE


def catalog_path() -> Path:
    raw = os.getenv(_CATALOG_PATH_ENV)
    return Path(raw) if raw else DEFAULT_CATALOG_PATH


def espn_timeout() -> float:
    return _env_float(_ESPN_TIMEOUT_ENV, _ESPN_TIMEOUT_DEFAULT, clamp_min=0.5)


def espn_retries() -> int:
    return _env_int(_ESPN_RETRIES_ENV, _ESPN_RETRIES_DEFAULT, min_value=1)
