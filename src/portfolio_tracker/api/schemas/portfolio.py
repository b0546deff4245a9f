"""Pydantic schemas for the portfolio summary API."""

from pydantic import BaseModel

from portfolio_tracker.domain.views import ValuedHolding, PortfolioTotals, AllocationItem


class ValuedHoldingResponse(BaseModel):
    """A holding with live-price metrics. The cash row has is_cash=true."""

    ticker: str
    total_shares: float
    avg_buy_price: float
    price: float
    previous_close: float
    current_value: float
    unrealized_gain: float
    unrealized_gain_percent: float
    daily_change: float
    is_cash: bool

    @classmethod
    def from_domain(cls, row: ValuedHolding) -> "ValuedHoldingResponse":
        return cls(
            ticker=row.ticker,
            total_shares=float(row.total_shares),
            avg_buy_price=float(row.avg_buy_price),
            price=float(row.price),
            previous_close=float(row.previous_close),
            current_value=float(row.current_value),
            unrealized_gain=float(row.unrealized_gain),
            unrealized_gain_percent=float(row.unrealized_gain_percent),
            daily_change=float(row.daily_change),
            is_cash=row.is_cash,
        )


class PortfolioTotalsResponse(BaseModel):
    """Portfolio-level sums."""

    total_value: float
    total_gain: float
    total_daily_change: float

    @classmethod
    def from_domain(cls, totals: PortfolioTotals) -> "PortfolioTotalsResponse":
        return cls(
            total_value=float(totals.total_value),
            total_gain=float(totals.total_gain),
            total_daily_change=float(totals.total_daily_change),
        )


class AllocationItemResponse(BaseModel):
    """Share of total portfolio value held in one ticker."""

    ticker: str
    market_value: float
    percentage: float

    @classmethod
    def from_domain(cls, item: AllocationItem) -> "AllocationItemResponse":
        return cls(
            ticker=item.ticker,
            market_value=float(item.market_value),
            percentage=float(item.percentage),
        )


class PortfolioResponse(BaseModel):
    """Holdings, totals and allocation for the whole portfolio."""

    holdings: list[ValuedHoldingResponse]
    totals: PortfolioTotalsResponse
    allocation: list[AllocationItemResponse]
    cash_balance: float
