"""Environment-driven process settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

CONTRACTS_PATH_ENV = "NBAVALUE_CONTRACTS_PATH"
DEFAULT_AGE_ENV = "NBAVALUE_DEFAULT_AGE"
LOG_LEVEL_ENV = "NBAVALUE_LOG_LEVEL"

_CONTRACTS_PATH_DEFAULT = Path("data") / "contracts.csv"
# Mid-career age used when a player's birthdate is unknown.
_DEFAULT_AGE = 25
_LOG_LEVEL_DEFAULT = "INFO"


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


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Invalid log level for %s: %s; using default %s", name, raw, default)
        return default
    return level


@dataclass(frozen=True)
class Settings:
    contracts_path: Path
    default_age: int
    log_level: str


def load_settings() -> Settings:
    """Read settings from the environment, falling back to defaults."""

    raw_path = os.getenv(CONTRACTS_PATH_ENV)
    contracts_path = Path(raw_path) if raw_path else _CONTRACTS_PATH_DEFAULT
    return Settings(
        contracts_path=contracts_path,
        default_age=_env_int(DEFAULT_AGE_ENV, _DEFAULT_AGE, min_value=0),
        log_level=_env_log_level(LOG_LEVEL_ENV, _LOG_LEVEL_DEFAULT),
    )
