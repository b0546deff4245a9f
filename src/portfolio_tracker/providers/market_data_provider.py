"""Market data provider protocols."""

from typing import Protocol

from portfolio_tracker.domain.views import PricePoint, Quote, Timeframe


class MarketDataProvider(Protocol):
    """
    Protocol for market data providers.

    Implementations fetch current price and previous close per symbol.
    """

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """
        Fetch quotes for multiple symbols.

        Returns dict mapping symbol -> Quote. Missing symbols are omitted from result.
        """
        ...


class PriceHistoryProvider(Protocol):
    """Protocol for providers that can return chart bars for one symbol."""

    def get_price_history(self, symbol: str, timeframe: Timeframe) -> list[PricePoint]:
        """
        Fetch bars covering timeframe.period at timeframe.interval, oldest first.

        Bars without a close are not returned. An unknown symbol gives an empty list.
        """
        ...
