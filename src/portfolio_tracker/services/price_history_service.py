"""Price history service for the chart screen."""

import logging
from datetime import datetime
from typing import Optional

from portfolio_tracker.core.exceptions import (
    MarketDataUnavailableError,
    NotFoundError,
    UnknownTimeframeError,
)
from portfolio_tracker.core.timezone import now_eastern
from portfolio_tracker.domain.views import (
    DEFAULT_TIMEFRAME,
    TIMEFRAMES,
    PriceHistory,
    Timeframe,
)
from portfolio_tracker.providers.market_data_provider import PriceHistoryProvider

logger = logging.getLogger(__name__)


class PriceHistoryService:
    """
    Service for chart bars.

    Resolves the timeframe key, asks the provider for bars and caches
    non-empty results per (symbol, timeframe) for the TTL.
    """

    def __init__(self, provider: PriceHistoryProvider, cache_ttl_seconds: int = 60):
        self._provider = provider
        self._cache_ttl = cache_ttl_seconds
        self._cache: dict[tuple[str, str], tuple[PriceHistory, datetime]] = {}

    @staticmethod
    def resolve_timeframe(key: Optional[str]) -> Timeframe:
        """Look up a timeframe by key, case-insensitive. None means the default."""
        normalized = (key or DEFAULT_TIMEFRAME).strip().lower()
        timeframe = TIMEFRAMES.get(normalized)
        if timeframe is None:
            raise UnknownTimeframeError(key, list(TIMEFRAMES))
        return timeframe

    def get_history(self, symbol: str, timeframe_key: Optional[str] = None) -> PriceHistory:
        """
        Return bars for symbol over the timeframe, oldest first.

        Raises:
            UnknownTimeframeError: timeframe_key is not supported.
            NotFoundError: the provider has no bar with a close.
            MarketDataUnavailableError: the provider raised.
        """
        timeframe = self.resolve_timeframe(timeframe_key)
        symbol = (symbol or "").strip().upper()
        if not symbol:
            raise NotFoundError("Price history", "<blank symbol>")

        cache_key = (symbol, timeframe.key)
        cached = self._cache.get(cache_key)
        if cached and (now_eastern() - cached[1]).total_seconds() < self._cache_ttl:
            return cached[0]

        try:
            points = self._provider.get_price_history(symbol, timeframe)
        except Exception as e:
            logger.warning("History provider failed for %s (%s): %s", symbol, timeframe.key, e)
            raise MarketDataUnavailableError(f"Price history unavailable for {symbol}") from e

        points = sorted((p for p in points if p.close is not None), key=lambda p: p.timestamp)
        if not points:
            raise NotFoundError("Price history", f"{symbol} ({timeframe.key})")

        history = PriceHistory(symbol=symbol, timeframe=timeframe, points=points)
        self._cache[cache_key] = (history, now_eastern())
        logger.debug("Loaded %d bars for %s (%s)", len(points), symbol, timeframe.key)
        return history

    def clear_cache(self) -> None:
        self._cache.clear()
