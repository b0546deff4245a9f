"""Logging setup shared by the HTTP app and the in-process app context."""

import logging
import sys
from typing import Optional

from portfolio_tracker.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# SQL echo, yfinance request chatter and its HTTP and tz-cache backends
QUIET_LOGGERS = ("sqlalchemy.engine", "yfinance", "urllib3", "peewee")

APP_LOGGER = __name__.split(".")[0]


def level_from_name(name: str, fallback: int = logging.INFO) -> int:
    """Map a level name such as "debug" to its number; unknown names give fallback."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else fallback


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure logging from settings.

    basicConfig only takes effect when the root logger has no handlers
    (uvicorn and pytest install their own), so the app logger and the
    quiet third-party loggers are always set explicitly.
    """
    settings = settings or get_settings()
    app_level = level_from_name(settings.log_level)

    logging.basicConfig(
        level=app_level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(APP_LOGGER).setLevel(app_level)

    quiet_level = level_from_name(settings.third_party_log_level, fallback=logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)
