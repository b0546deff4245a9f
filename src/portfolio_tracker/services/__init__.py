"""Service layer - business logic orchestration."""

from portfolio_tracker.services.holdings_engine import (
    aggregate_holdings,
    value_holdings,
    allocation,
)
from portfolio_tracker.services.validation import (
    validate_trade_input,
    validate_cash_input,
    build_cash_transaction,
)
from portfolio_tracker.services.market_data_service import MarketDataService
from portfolio_tracker.services.price_history_service import PriceHistoryService
from portfolio_tracker.services.portfolio_store import PortfolioStore, PortfolioSnapshot
from portfolio_tracker.services.watchlist_service import WatchlistService

__all__ = [
    "aggregate_holdings",
    "value_holdings",
    "allocation",
    "validate_trade_input",
    "validate_cash_input",
    "build_cash_transaction",
    "MarketDataService",
    "PriceHistoryService",
    "PortfolioStore",
    "PortfolioSnapshot",
    "WatchlistService",
]
