"""
Pytest configuration and fixtures for portfolio tracker tests.

This module provides:
- In-memory SQLite database fixtures
- Key-value store, repository and portfolio store fixtures
- Deterministic stub market data providers
- Time helpers for Eastern timezone
- Factory helpers for trades and cash transactions
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from portfolio_tracker.main import app
from portfolio_tracker.api.deps import get_market_data_service, get_price_history_service
from portfolio_tracker.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from portfolio_tracker.repositories.sqlalchemy import orm_models  # noqa: F401
from portfolio_tracker.repositories.sqlalchemy import SqlAlchemyKeyValueStore
from portfolio_tracker.repositories import TransactionLogRepository
from portfolio_tracker.providers.stub_provider import StubMarketDataProvider
from portfolio_tracker.services import (
    MarketDataService,
    PortfolioStore,
    PriceHistoryService,
    WatchlistService,
)
from portfolio_tracker.domain.models import (
    Transaction,
    CashTransaction,
    CashTransactionType,
)
from portfolio_tracker.domain.views import PricePoint, Quote, Timeframe
from portfolio_tracker.core.timezone import EASTERN_TZ
from portfolio_tracker.config.settings import Settings, set_settings, reset_settings


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in US/Eastern timezone."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute, second))


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed 'now' timestamp for deterministic tests."""
    return eastern_datetime(2024, 6, 15, 14, 30, 0)


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def kv_store(test_session) -> SqlAlchemyKeyValueStore:
    """Provide test KeyValueStore."""
    return SqlAlchemyKeyValueStore(test_session)


@pytest.fixture
def log_repository(kv_store) -> TransactionLogRepository:
    """Provide test TransactionLogRepository."""
    return TransactionLogRepository(kv_store)


# =============================================================================
# MARKET DATA FIXTURES
# =============================================================================


class DeterministicMarketProvider:
    """
    Deterministic market data provider for testing.

    Provides fixed quotes with no randomness and counts calls.
    """

    FIXED_QUOTES = {
        "AAPL": (Decimal("185.50"), Decimal("184.25")),  # +1.25
        "GOOGL": (Decimal("142.75"), Decimal("141.50")),  # +1.25
        "MSFT": (Decimal("378.25"), Decimal("376.80")),  # +1.45
        "TSLA": (Decimal("248.75"), Decimal("250.10")),  # -1.35 (down)
        "^GSPC": (Decimal("5431.60"), Decimal("5421.03")),
        "^DJI": (Decimal("38589.16"), Decimal("38647.10")),
    }

    def __init__(self, as_of: Optional[datetime] = None):
        self._as_of = as_of or eastern_datetime(2024, 6, 15, 16, 0, 0)
        self.calls: list[list[str]] = []

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return deterministic quotes for requested symbols."""
        self.calls.append(list(symbols))
        result = {}
        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in self.FIXED_QUOTES:
                price, previous_close = self.FIXED_QUOTES[upper_symbol]
                result[upper_symbol] = Quote(
                    symbol=upper_symbol,
                    price=price,
                    previous_close=previous_close,
                    name=upper_symbol,
                    as_of=self._as_of,
                )
        return result


class FailingMarketProvider:
    """Market provider that always raises an exception."""

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        raise ConnectionError("Network unavailable")

    def get_price_history(self, symbol: str, timeframe: Timeframe) -> list[PricePoint]:
        raise ConnectionError("Network unavailable")


@pytest.fixture
def deterministic_provider(fixed_now) -> DeterministicMarketProvider:
    """Provide deterministic market data provider."""
    return DeterministicMarketProvider(as_of=fixed_now)


@pytest.fixture
def failing_provider() -> FailingMarketProvider:
    """Provide a market provider that always fails."""
    return FailingMarketProvider()


@pytest.fixture
def market_provider() -> StubMarketDataProvider:
    """Provide test MarketDataProvider with fixed seed."""
    return StubMarketDataProvider(seed=42)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def market_data_service(deterministic_provider) -> MarketDataService:
    """Provide test MarketDataService with deterministic provider."""
    return MarketDataService(
        provider=deterministic_provider,
        cache_ttl_seconds=60,
    )


@pytest.fixture
def price_history_service(market_provider) -> PriceHistoryService:
    """Provide test PriceHistoryService over the seeded stub provider."""
    return PriceHistoryService(provider=market_provider, cache_ttl_seconds=60)


@pytest.fixture
def portfolio_store(log_repository) -> PortfolioStore:
    """Provide test PortfolioStore backed by the in-memory database."""
    return PortfolioStore(log_repository)


@pytest.fixture
def watchlist_service(log_repository, market_data_service) -> WatchlistService:
    """Provide test WatchlistService."""
    return WatchlistService(
        repository=log_repository,
        market_data=market_data_service,
    )


# =============================================================================
# API TEST CLIENT FIXTURE
# =============================================================================


@pytest.fixture
def client(test_engine, market_data_service, price_history_service, tmp_path) -> TestClient:
    """Provide FastAPI test client with test database and deterministic quotes."""
    # Startup init_db must not touch the real data directory
    set_settings(Settings(data_dir=tmp_path))
    reset_database()
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_market_data_service] = lambda: market_data_service
    app.dependency_overrides[get_price_history_service] = lambda: price_history_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()


# =============================================================================
# HELPER FUNCTIONS (exported for use in tests)
# =============================================================================


def make_trade(
    ticker: str,
    shares: str,
    price: str,
    date: str = "2024-06-14",
) -> Transaction:
    """Build a Transaction from string amounts."""
    return Transaction(
        ticker=ticker,
        date=date,
        shares=Decimal(shares),
        price=Decimal(price),
    )


def make_cash(amount: str, date: str = "2024-06-14") -> CashTransaction:
    """Build a CashTransaction; the type follows the sign of amount."""
    value = Decimal(amount)
    txn_type = CashTransactionType.WITHDRAWAL if value < 0 else CashTransactionType.DEPOSIT
    return CashTransaction(date=date, amount=value, type=txn_type)


def make_quote(symbol: str, price: str, previous_close: str) -> Quote:
    return Quote(symbol=symbol, price=Decimal(price), previous_close=Decimal(previous_close))


def assert_decimal_equal(
    actual: Decimal,
    expected: Decimal,
    tolerance: Decimal = Decimal("0.01"),
) -> None:
    """Assert two Decimals are equal within tolerance."""
    diff = abs(actual - expected)
    assert diff <= tolerance, f"Expected {expected}, got {actual} (diff={diff})"
