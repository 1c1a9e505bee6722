"""Settings read from the environment and logging setup."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from pocketcalc.exceptions import ConfigError

LOG_LEVEL_ENV = "POCKETCALC_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the command line front end."""

    log_level: str = DEFAULT_LOG_LEVEL


def _check_level(name: str) -> str:
    level = name.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(LOG_LEVEL_ENV, name)
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """
    Build settings from ``environ`` (defaults to ``os.environ``).

    Raises:
        ConfigError: If the log level names no logging level
    """
    env = os.environ if environ is None else environ
    return Settings(log_level=_check_level(env.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)))


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Set the root logger to ``level`` and give it a stderr handler if it has none."""
    root = logging.getLogger()
    root.setLevel(_check_level(level))
    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
