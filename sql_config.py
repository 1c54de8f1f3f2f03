# sql_config.py
"""Settings for the SQL cheat sheet, read from .env and the environment."""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

APP_NAME = "SQL Cheat Sheet"


@dataclass(frozen=True)
class Config:
    debounce_ms: int = 100
    popover_width: int = 750
    popover_height: int = 600
    copy_feedback_seconds: float = 2.0
    log_file: str = os.path.join(os.path.abspath("."), "sqlwidget.log")
    log_level: str = "INFO"
    hotkey_enabled: bool = True

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


def _int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Config: %s=%r is not an integer, using %d", key, raw, default)
        return default
    if value < 0:
        logger.warning("Config: %s=%r is negative, using %d", key, raw, default)
        return default
    return value


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Config: %s=%r is not a number, using %s", key, raw, default)
        return default
    if value < 0:
        logger.warning("Config: %s=%r is negative, using %s", key, raw, default)
        return default
    return value


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build a Config. With no mapping given, .env is loaded into os.environ first
    and os.environ is used.
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ
    defaults = Config()
    level = (environ.get("SQLWIDGET_LOG_LEVEL") or defaults.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Config: unknown log level %r, using %s", level, defaults.log_level)
        level = defaults.log_level
    return Config(
        debounce_ms=_int(environ, "SQLWIDGET_DEBOUNCE_MS", defaults.debounce_ms),
        popover_width=_int(environ, "SQLWIDGET_POPOVER_WIDTH", defaults.popover_width),
        popover_height=_int(environ, "SQLWIDGET_POPOVER_HEIGHT", defaults.popover_height),
        copy_feedback_seconds=_float(environ, "SQLWIDGET_COPY_FEEDBACK_SECONDS", defaults.copy_feedback_seconds),
        log_file=os.path.abspath(environ.get("SQLWIDGET_LOG_FILE") or defaults.log_file),
        log_level=level,
        hotkey_enabled=(environ.get("SQLWIDGET_HOTKEY", "1") != "0"),
    )
