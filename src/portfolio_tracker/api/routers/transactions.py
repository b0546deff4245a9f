"""Trade log API: list, add and delete buy/sell transactions."""

from fastapi import APIRouter, Depends, Response

from portfolio_tracker.api.deps import get_portfolio_store
from portfolio_tracker.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionListResponse,
)
from portfolio_tracker.services import PortfolioStore
from portfolio_tracker.services.ledger import display_order

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(store: PortfolioStore = Depends(get_portfolio_store)):
    """Return all trades, newest first."""
    items = [TransactionResponse.from_domain(t) for t in display_order(store.transactions)]
    return TransactionListResponse(items=items, total=len(items))


@router.post("", response_model=TransactionResponse, status_code=201)
def add_transaction(
    body: TransactionCreateRequest,
    store: PortfolioStore = Depends(get_portfolio_store),
):
    """
    Add a trade. Positive shares buy, negative shares sell.

    Returns 400 with MISSING_FIELD, NOT_A_NUMBER or INVALID_AMOUNT on bad input.
    """
    txn = store.add_trade(
        ticker=body.ticker,
        date=body.date,
        shares=body.shares,
        price=body.price,
    )
    return TransactionResponse.from_domain(txn)


@router.delete("/{txn_id}", status_code=204)
def delete_transaction(
    txn_id: str,
    store: PortfolioStore = Depends(get_portfolio_store),
) -> Response:
    """Delete a trade by id."""
    store.delete_trade(txn_id)
    return Response(status_code=204)
