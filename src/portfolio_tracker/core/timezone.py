"""Timezone utilities for US/Eastern market time."""

from datetime import datetime

import pytz

EASTERN_TZ = pytz.timezone("US/Eastern")


def now_eastern() -> datetime:
    """Return current time in US/Eastern timezone."""
    return datetime.now(EASTERN_TZ)


def today_eastern_iso() -> str:
    """Return today's US/Eastern calendar date as YYYY-MM-DD."""
    return now_eastern().date().isoformat()
