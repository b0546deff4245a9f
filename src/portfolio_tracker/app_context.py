"""Application context for in-process service management.

Provides a centralized way to access the portfolio store, market data and
watchlist without HTTP. Screens subscribe to ``context.portfolio`` instead of
signalling each other to refresh.
"""

from pathlib import Path
from typing import Optional

from portfolio_tracker.api.deps import build_history_provider, build_market_provider
from portfolio_tracker.config.logging_config import setup_logging
from portfolio_tracker.config.settings import Settings, set_settings, get_settings
from portfolio_tracker.repositories import TransactionLogRepository
from portfolio_tracker.repositories.sqlalchemy import (
    SqlAlchemyKeyValueStore,
    init_db_with_path,
    reset_database,
    get_session,
)
from portfolio_tracker.services import (
    MarketDataService,
    PortfolioStore,
    PriceHistoryService,
    WatchlistService,
)


class AppContext:
    """
    Application context providing in-process access to all services.

    The portfolio store is created once per initialization so every consumer
    shares the same logs and the same subscriptions.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        self._data_dir = data_dir
        self._session = None
        self._initialized = False

        # Lazy service instances
        self._repository: Optional[TransactionLogRepository] = None
        self._portfolio_store: Optional[PortfolioStore] = None
        self._market_data_service: Optional[MarketDataService] = None
        self._price_history_service: Optional[PriceHistoryService] = None
        self._watchlist_service: Optional[WatchlistService] = None

    def initialize(self, data_dir: Optional[Path] = None) -> None:
        """
        Initialize or reinitialize the application with a data directory.

        Args:
            data_dir: Data directory path. Uses default if not provided.
        """
        if data_dir:
            self._data_dir = data_dir

        settings = Settings(data_dir=self._data_dir)
        set_settings(settings)
        setup_logging(settings)

        self.close()
        reset_database()
        init_db_with_path(settings.get_data_dir() / "portfolio.db")

        self._repository = None
        self._portfolio_store = None
        self._market_data_service = None
        self._price_history_service = None
        self._watchlist_service = None

        self._initialized = True

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def data_dir(self) -> Path:
        """Get the current data directory."""
        return get_settings().get_data_dir()

    def _get_session(self):
        if self._session is None:
            self._session = get_session()
        return self._session

    def _get_repository(self) -> TransactionLogRepository:
        if self._repository is None:
            self._repository = TransactionLogRepository(
                SqlAlchemyKeyValueStore(self._get_session())
            )
        return self._repository

    @property
    def portfolio(self) -> PortfolioStore:
        """Get the shared PortfolioStore instance."""
        if self._portfolio_store is None:
            self._portfolio_store = PortfolioStore(self._get_repository())
        return self._portfolio_store

    @property
    def market_data(self) -> MarketDataService:
        """Get the MarketDataService instance."""
        if self._market_data_service is None:
            settings = get_settings()
            self._market_data_service = MarketDataService(
                provider=build_market_provider(),
                cache_ttl_seconds=settings.market_data_cache_ttl_seconds,
            )
        return self._market_data_service

    @property
    def price_history(self) -> PriceHistoryService:
        """Get the PriceHistoryService instance."""
        if self._price_history_service is None:
            settings = get_settings()
            self._price_history_service = PriceHistoryService(
                provider=build_history_provider(),
                cache_ttl_seconds=settings.market_data_cache_ttl_seconds,
            )
        return self._price_history_service

    @property
    def watchlist(self) -> WatchlistService:
        """Get the WatchlistService instance."""
        if self._watchlist_service is None:
            self._watchlist_service = WatchlistService(
                repository=self._get_repository(),
                market_data=self.market_data,
            )
        return self._watchlist_service

    def close(self) -> None:
        """Clean up resources."""
        if self._session:
            self._session.close()
            self._session = None


# Global application context
_app_context: Optional[AppContext] = None


def get_app_context() -> AppContext:
    """Get or create the global application context."""
    global _app_context
    if _app_context is None:
        _app_context = AppContext()
    return _app_context


def set_app_context(context: AppContext) -> None:
    """Set the global application context."""
    global _app_context
    _app_context = context
