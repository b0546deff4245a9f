"""Core utilities and shared functionality."""

from portfolio_tracker.core.timezone import (
    now_eastern,
    today_eastern_iso,
    EASTERN_TZ,
)
from portfolio_tracker.core.exceptions import (
    AppError,
    ValidationError,
    MissingFieldError,
    NotANumberError,
    InvalidAmountError,
    UnknownTimeframeError,
    NotFoundError,
    MarketDataUnavailableError,
    IndexOutOfRangeError,
)

__all__ = [
    "now_eastern",
    "today_eastern_iso",
    "EASTERN_TZ",
    "AppError",
    "ValidationError",
    "MissingFieldError",
    "NotANumberError",
    "InvalidAmountError",
    "UnknownTimeframeError",
    "NotFoundError",
    "MarketDataUnavailableError",
    "IndexOutOfRangeError",
]
