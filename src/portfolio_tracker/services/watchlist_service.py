"""Watchlist service: market indices, preset symbols and user-added symbols."""

import logging

from portfolio_tracker.core.exceptions import MissingFieldError, NotFoundError
from portfolio_tracker.domain.views import Quote
from portfolio_tracker.repositories.transaction_log_repo import TransactionLogRepository
from portfolio_tracker.services.market_data_service import MarketDataService

logger = logging.getLogger(__name__)

MARKET_INDICES: dict[str, str] = {
    "^GSPC": "S&P 500",
    "^DJI": "Dow Jones",
    "^IXIC": "NASDAQ",
    "^RUT": "Russell 2000",
    "^VIX": "VIX",
}

PRESET_SYMBOLS: list[str] = [
    # Large-cap tech
    "AAPL", "MSFT", "GOOGL", "AMZN", "META", "TSLA", "NFLX", "NVDA",
    # Other popular stocks
    "BRK-B", "JPM", "JNJ", "V", "PG", "UNH", "HD", "MA",
    "DIS", "PYPL", "ADBE", "CRM", "INTC", "CMCSA", "VZ", "T",
    "PFE", "KO", "PEP", "WMT", "MRK", "ABT", "COST", "AVGO",
]

DEFAULT_WATCHLIST: list[str] = [*MARKET_INDICES, *PRESET_SYMBOLS[:5]]


class WatchlistService:
    """
    Persisted list of symbols to follow.

    A fresh install starts with every market index and the first five presets.
    """

    def __init__(
        self,
        repository: TransactionLogRepository,
        market_data: MarketDataService,
    ):
        self._repo = repository
        self._market = market_data

    def list_symbols(self) -> list[str]:
        saved = self._repo.load_watchlist()
        return list(DEFAULT_WATCHLIST) if saved is None else saved

    def list_stocks(self) -> list[str]:
        """Watchlist symbols that are not market indices."""
        return [s for s in self.list_symbols() if s not in MARKET_INDICES]

    def add(self, symbol: str) -> list[str]:
        """Append symbol (uppercased); adding an existing symbol is a no-op."""
        normalized = (symbol or "").strip().upper()
        if not normalized:
            raise MissingFieldError("symbol")

        symbols = self.list_symbols()
        if normalized not in symbols:
            symbols = [*symbols, normalized]
            self._repo.save_watchlist(symbols)
            logger.info("Added %s to watchlist", normalized)
        return symbols

    def remove(self, symbol: str) -> list[str]:
        normalized = (symbol or "").strip().upper()
        symbols = self.list_symbols()
        if normalized not in symbols:
            raise NotFoundError("Watchlist symbol", normalized)

        symbols = [s for s in symbols if s != normalized]
        self._repo.save_watchlist(symbols)
        logger.info("Removed %s from watchlist", normalized)
        return symbols

    def available_presets(self) -> list[str]:
        """Preset symbols not yet on the watchlist."""
        current = set(self.list_symbols())
        return [s for s in PRESET_SYMBOLS if s not in current]

    def quotes(self) -> dict[str, Quote]:
        """Quotes for watchlist symbols; symbols without a valid quote are left out."""
        return self._market.get_quotes(self.list_symbols())

    @staticmethod
    def display_name(symbol: str) -> str:
        return MARKET_INDICES.get(symbol, symbol)
