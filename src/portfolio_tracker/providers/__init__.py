"""Market data providers module."""

from portfolio_tracker.providers.market_data_provider import MarketDataProvider, PriceHistoryProvider
from portfolio_tracker.providers.stub_provider import StubMarketDataProvider
from portfolio_tracker.providers.yahoo_provider import YahooFinanceProvider

__all__ = [
    "MarketDataProvider",
    "PriceHistoryProvider",
    "StubMarketDataProvider",
    "YahooFinanceProvider",
]
