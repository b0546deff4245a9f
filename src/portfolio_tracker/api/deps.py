"""Dependency injection for FastAPI."""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from portfolio_tracker.config.settings import get_settings
from portfolio_tracker.providers import (
    MarketDataProvider,
    PriceHistoryProvider,
    StubMarketDataProvider,
    YahooFinanceProvider,
)
from portfolio_tracker.repositories import TransactionLogRepository
from portfolio_tracker.repositories.sqlalchemy import SqlAlchemyKeyValueStore, get_db
from portfolio_tracker.services import (
    MarketDataService,
    PortfolioStore,
    PriceHistoryService,
    WatchlistService,
)

# Process-wide so the quote and history caches survive across requests
_market_data_service: Optional[MarketDataService] = None
_price_history_service: Optional[PriceHistoryService] = None


def get_kv_store(db: Session = Depends(get_db)) -> SqlAlchemyKeyValueStore:
    """Provide KeyValueStore instance."""
    return SqlAlchemyKeyValueStore(db)


def get_log_repository(
    store: SqlAlchemyKeyValueStore = Depends(get_kv_store),
) -> TransactionLogRepository:
    """Provide TransactionLogRepository instance."""
    return TransactionLogRepository(store)


def get_portfolio_store(
    repository: TransactionLogRepository = Depends(get_log_repository),
) -> PortfolioStore:
    """Provide PortfolioStore loaded from persistence."""
    return PortfolioStore(repository)


def _build_provider() -> StubMarketDataProvider | YahooFinanceProvider:
    settings = get_settings()
    if settings.market_data_provider == "yahoo":
        return YahooFinanceProvider(
            fetch_timeout_seconds=settings.market_data_fetch_timeout_seconds,
        )
    return StubMarketDataProvider()


def build_market_provider() -> MarketDataProvider:
    """Select the quote provider named in settings."""
    return _build_provider()


def build_history_provider() -> PriceHistoryProvider:
    """Select the price history provider named in settings."""
    return _build_provider()


def get_market_data_service() -> MarketDataService:
    """Provide the shared MarketDataService instance."""
    global _market_data_service
    if _market_data_service is None:
        settings = get_settings()
        _market_data_service = MarketDataService(
            provider=build_market_provider(),
            cache_ttl_seconds=settings.market_data_cache_ttl_seconds,
        )
    return _market_data_service


def get_price_history_service() -> PriceHistoryService:
    """Provide the shared PriceHistoryService instance."""
    global _price_history_service
    if _price_history_service is None:
        settings = get_settings()
        _price_history_service = PriceHistoryService(
            provider=build_history_provider(),
            cache_ttl_seconds=settings.market_data_cache_ttl_seconds,
        )
    return _price_history_service


def reset_market_data_service() -> None:
    """Drop the shared market data services (after settings change)."""
    global _market_data_service, _price_history_service
    _market_data_service = None
    _price_history_service = None


def get_watchlist_service(
    repository: TransactionLogRepository = Depends(get_log_repository),
    market_data: MarketDataService = Depends(get_market_data_service),
) -> WatchlistService:
    """Provide WatchlistService instance."""
    return WatchlistService(repository=repository, market_data=market_data)
