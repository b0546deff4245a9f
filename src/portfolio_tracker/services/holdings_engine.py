"""Holdings engine: derive holdings and valuation from the transaction logs."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Mapping

from portfolio_tracker.domain.models import Transaction, CashTransaction
from portfolio_tracker.domain.views import (
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

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def _is_positive(value: Decimal) -> bool:
    # NaN is never positive; Decimal ordering against NaN would raise instead.
    return not value.is_nan() and value > ZERO


def aggregate_holdings(
    transactions: Iterable[Transaction],
    cash_transactions: Iterable[CashTransaction],
) -> list[Holding]:
    """
    Group the trade log by ticker and fold the cash log into one balance.

    avg_buy_price is the cost-weighted average, and 0 for flat or net-short
    positions. Output is sorted by ticker with the cash holding last; the
    cash holding is only present when its balance is nonzero.
    """
    shares_by_ticker: dict[str, Decimal] = defaultdict(lambda: ZERO)
    cost_by_ticker: dict[str, Decimal] = defaultdict(lambda: ZERO)

    for txn in transactions:
        shares_by_ticker[txn.ticker] += txn.shares
        cost_by_ticker[txn.ticker] += txn.shares * txn.price

    holdings: list[Holding] = []
    for ticker in sorted(shares_by_ticker):
        total_shares = shares_by_ticker[ticker]
        avg_buy_price = (
            cost_by_ticker[ticker] / total_shares if _is_positive(total_shares) else ZERO
        )
        holdings.append(
            InstrumentHolding(
                ticker=ticker,
                total_shares=total_shares,
                avg_buy_price=avg_buy_price,
            )
        )

    cash_balance = sum((c.amount for c in cash_transactions), ZERO)
    if cash_balance != ZERO:
        holdings.append(CashHolding(balance=cash_balance))

    return holdings


def value_holdings(
    holdings: Iterable[Holding],
    quotes: Mapping[str, Quote],
) -> PortfolioValuation:
    """
    Combine holdings with live quotes.

    A missing quote values the holding at price 0 and previous close 0; the
    unrealized gain is still computed against that zero price.
    """
    rows: list[ValuedHolding] = []
    totals = PortfolioTotals()

    for holding in holdings:
        if isinstance(holding, CashHolding):
            row = ValuedHolding(
                ticker=holding.ticker,
                total_shares=holding.balance,
                avg_buy_price=holding.balance,
                price=ZERO,
                previous_close=ZERO,
                current_value=holding.balance,
                unrealized_gain=ZERO,
                unrealized_gain_percent=ZERO,
                daily_change=ZERO,
                is_cash=True,
            )
        else:
            quote = quotes.get(holding.ticker)
            price = quote.price if quote else ZERO
            previous_close = quote.previous_close if quote else ZERO
            avg = holding.avg_buy_price
            shares = holding.total_shares

            gain_percent = (price - avg) / avg * HUNDRED if _is_positive(avg) else ZERO
            row = ValuedHolding(
                ticker=holding.ticker,
                total_shares=shares,
                avg_buy_price=avg,
                price=price,
                previous_close=previous_close,
                current_value=shares * price,
                unrealized_gain=(price - avg) * shares,
                unrealized_gain_percent=gain_percent,
                daily_change=(price - previous_close) * shares,
            )

        rows.append(row)
        totals.total_value += row.current_value
        totals.total_gain += row.unrealized_gain
        totals.total_daily_change += row.daily_change

    return PortfolioValuation(per_holding=rows, totals=totals)


def allocation(valuation: PortfolioValuation) -> AllocationView:
    """
    Break the portfolio value down by holding.

    Percentages are of total value (cash included), rounded to cents of a
    percent, sorted by market value descending.
    """
    total_value = valuation.totals.total_value
    has_total = total_value.is_finite() and total_value != ZERO

    items = [
        AllocationItem(
            ticker=row.ticker,
            market_value=row.current_value,
            percentage=(
                (row.current_value / total_value * HUNDRED).quantize(Decimal("0.01"))
                if has_total
                else ZERO
            ),
        )
        for row in valuation.per_holding
    ]

    items.sort(
        key=lambda x: x.market_value if not x.market_value.is_nan() else Decimal("-Infinity"),
        reverse=True,
    )

    return AllocationView(items=items, total_value=total_value)
