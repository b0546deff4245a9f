"""Cash log API: deposits and withdrawals."""

from fastapi import APIRouter, Depends, Response

from portfolio_tracker.api.deps import get_portfolio_store
from portfolio_tracker.api.schemas.transaction import (
    CashTransactionCreateRequest,
    CashTransactionResponse,
    CashTransactionListResponse,
)
from portfolio_tracker.services import PortfolioStore
from portfolio_tracker.services.ledger import display_order

router = APIRouter(prefix="/cash-transactions", tags=["cash"])


@router.get("", response_model=CashTransactionListResponse)
def list_cash_transactions(store: PortfolioStore = Depends(get_portfolio_store)):
    """Return cash transactions newest first, with the total balance."""
    items = [
        CashTransactionResponse.from_domain(c)
        for c in display_order(store.cash_transactions)
    ]
    return CashTransactionListResponse(
        items=items,
        total=len(items),
        balance=float(store.cash_balance()),
    )


@router.post("", response_model=CashTransactionResponse, status_code=201)
def add_cash_transaction(
    body: CashTransactionCreateRequest,
    store: PortfolioStore = Depends(get_portfolio_store),
):
    """Record a deposit or withdrawal; amount is always a positive magnitude."""
    cash_txn = store.add_cash(amount=body.amount, txn_type=body.type, date=body.date)
    return CashTransactionResponse.from_domain(cash_txn)


@router.delete("/{txn_id}", status_code=204)
def delete_cash_transaction(
    txn_id: str,
    store: PortfolioStore = Depends(get_portfolio_store),
) -> Response:
    store.delete_cash(txn_id)
    return Response(status_code=204)
