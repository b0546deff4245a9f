"""Portfolio summary API: GET /portfolio from transaction-derived data."""

from fastapi import APIRouter, Depends, Query

from portfolio_tracker.api.deps import get_market_data_service, get_portfolio_store
from portfolio_tracker.api.schemas.portfolio import (
    PortfolioResponse,
    ValuedHoldingResponse,
    PortfolioTotalsResponse,
    AllocationItemResponse,
)
from portfolio_tracker.services import MarketDataService, PortfolioStore

router = APIRouter(prefix="/portfolio", tags=["portfolio"])


@router.get("", response_model=PortfolioResponse)
def get_portfolio(
    quotes: bool = Query(
        True,
        description="Fetch live quotes. When false, every instrument is valued at price 0.",
    ),
    store: PortfolioStore = Depends(get_portfolio_store),
    market_data: MarketDataService = Depends(get_market_data_service),
):
    """
    Return holdings valued at live prices, portfolio totals and allocation.

    Tickers with no available quote are valued at zero rather than hidden.
    """
    if quotes:
        store.refresh_quotes(market_data)

    snapshot = store.snapshot()
    return PortfolioResponse(
        holdings=[ValuedHoldingResponse.from_domain(r) for r in snapshot.valuation.per_holding],
        totals=PortfolioTotalsResponse.from_domain(snapshot.valuation.totals),
        allocation=[AllocationItemResponse.from_domain(i) for i in snapshot.allocation.items],
        cash_balance=float(snapshot.cash_balance),
    )
