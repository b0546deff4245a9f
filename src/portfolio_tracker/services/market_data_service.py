"""Market data service for quotes."""

import logging
from datetime import datetime

from portfolio_tracker.core.timezone import now_eastern
from portfolio_tracker.domain.views import Quote
from portfolio_tracker.providers.market_data_provider import MarketDataProvider

logger = logging.getLogger(__name__)


class MarketDataService:
    """
    Service for fetching market quotes.

    Wraps provider with per-symbol TTL caching and graceful degradation.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        cache_ttl_seconds: int = 60,
    ):
        self._provider = provider
        self._cache_ttl = cache_ttl_seconds
        self._quote_cache: dict[str, tuple[Quote, datetime]] = {}

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for symbols with caching.

        Returns dict mapping symbol -> Quote. Uses cached data within TTL;
        falls back to any cached quote (even expired) on provider failure.
        Symbols with no quote at all are omitted.
        """
        if not symbols:
            return {}

        # Normalize symbols, keep first-seen order
        symbols = list(dict.fromkeys(s.strip().upper() for s in symbols if s and s.strip()))

        result: dict[str, Quote] = {}
        missing: list[str] = []
        for symbol in symbols:
            if self._is_fresh(symbol):
                result[symbol] = self._quote_cache[symbol][0]
            else:
                missing.append(symbol)

        if missing:
            try:
                new_quotes = self._provider.get_quotes(missing)
            except Exception as e:
                # Graceful degradation: serve whatever is in cache
                logger.warning("Quote provider failed for %s: %s", ", ".join(missing), e)
                for symbol in missing:
                    if symbol in self._quote_cache:
                        result[symbol] = self._quote_cache[symbol][0]
            else:
                fetched_at = now_eastern()
                for symbol, quote in new_quotes.items():
                    self._quote_cache[symbol] = (quote, fetched_at)
                for symbol in missing:
                    if symbol in new_quotes:
                        result[symbol] = new_quotes[symbol]
                    elif symbol in self._quote_cache:
                        result[symbol] = self._quote_cache[symbol][0]

        return {s: result[s] for s in symbols if s in result}

    def clear_cache(self) -> None:
        """Drop all cached quotes (manual refresh)."""
        self._quote_cache.clear()

    def _is_fresh(self, symbol: str) -> bool:
        """Check if the cached quote for symbol is within TTL."""
        cached = self._quote_cache.get(symbol)
        if not cached:
            return False
        elapsed = (now_eastern() - cached[1]).total_seconds()
        return elapsed < self._cache_ttl
