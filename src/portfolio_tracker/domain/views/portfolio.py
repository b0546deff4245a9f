"""View models for holdings, quotes and valuation outputs."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

CASH_TICKER = "Cash"


@dataclass(frozen=True)
class InstrumentHolding:
    """Aggregated net position in one ticker."""

    ticker: str
    total_shares: Decimal
    avg_buy_price: Decimal

    @property
    def is_cash(self) -> bool:
        return False


@dataclass(frozen=True)
class CashHolding:
    """
    Aggregated cash balance, shown as a pseudo-instrument.

    Its value always equals its balance, so shares and average price
    both report the balance.
    """

    balance: Decimal

    @property
    def ticker(self) -> str:
        return CASH_TICKER

    @property
    def total_shares(self) -> Decimal:
        return self.balance

    @property
    def avg_buy_price(self) -> Decimal:
        return self.balance

    @property
    def is_cash(self) -> bool:
        return True


Holding = Union[InstrumentHolding, CashHolding]


@dataclass
class Quote:
    """Market quote data for a symbol."""

    symbol: str
    price: Decimal
    previous_close: Decimal
    name: Optional[str] = None
    as_of: Optional[datetime] = None


@dataclass
class ValuedHolding:
    """A holding combined with its live quote."""

    ticker: str
    total_shares: Decimal
    avg_buy_price: Decimal
    price: Decimal
    previous_close: Decimal
    current_value: Decimal
    unrealized_gain: Decimal
    unrealized_gain_percent: Decimal
    daily_change: Decimal
    is_cash: bool = False


@dataclass
class PortfolioTotals:
    """Plain sums over every valued holding, cash included."""

    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
    total_gain: Decimal = field(default_factory=lambda: Decimal("0"))
    total_daily_change: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass
class PortfolioValuation:
    """Per-holding valuation rows plus portfolio totals."""

    per_holding: list[ValuedHolding] = field(default_factory=list)
    totals: PortfolioTotals = field(default_factory=PortfolioTotals)


@dataclass
class AllocationItem:
    """Single item in allocation breakdown."""

    ticker: str
    market_value: Decimal
    percentage: Decimal


@dataclass
class AllocationView:
    """Portfolio allocation breakdown."""

    items: list[AllocationItem] = field(default_factory=list)
    total_value: Decimal = field(default_factory=lambda: Decimal("0"))
