"""View models for service outputs."""

from portfolio_tracker.domain.views.portfolio import (
    CASH_TICKER,
    InstrumentHolding,
    CashHolding,
    Holding,
    Quote,
    ValuedHolding,
    PortfolioTotals,
    PortfolioValuation,
    AllocationItem,
    AllocationView,
)
from portfolio_tracker.domain.views.price_history import (
    Timeframe,
    TIMEFRAMES,
    DEFAULT_TIMEFRAME,
    PricePoint,
    PriceHistory,
)

__all__ = [
    "CASH_TICKER",
    "InstrumentHolding",
    "CashHolding",
    "Holding",
    "Quote",
    "ValuedHolding",
    "PortfolioTotals",
    "PortfolioValuation",
    "AllocationItem",
    "AllocationView",
    "Timeframe",
    "TIMEFRAMES",
    "DEFAULT_TIMEFRAME",
    "PricePoint",
    "PriceHistory",
]
