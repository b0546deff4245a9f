"""Pydantic schemas for trade and cash transaction endpoints."""

from typing import Optional, Union

from pydantic import BaseModel, Field

from portfolio_tracker.domain.models import Transaction, CashTransaction, CashTransactionType

# Raw form values; parsing and range checks happen in the validation service
FormNumber = Optional[Union[float, str]]


class TransactionCreateRequest(BaseModel):
    """Request schema for adding a trade."""

    ticker: Optional[str] = Field(default=None, max_length=20, description="Instrument symbol")
    date: Optional[str] = Field(default=None, description="Execution date (YYYY-MM-DD)")
    shares: FormNumber = Field(default=None, description="Signed share count; negative for a sale")
    price: FormNumber = Field(default=None, description="Price per share")


class TransactionResponse(BaseModel):
    """Response schema for a single trade."""

    id: str
    ticker: str
    date: str
    shares: float
    price: float

    @classmethod
    def from_domain(cls, txn: Transaction) -> "TransactionResponse":
        return cls(
            id=txn.txn_id,
            ticker=txn.ticker,
            date=txn.date,
            shares=float(txn.shares),
            price=float(txn.price),
        )


class TransactionListResponse(BaseModel):
    """Trades, newest first."""

    items: list[TransactionResponse]
    total: int


class CashTransactionCreateRequest(BaseModel):
    """Request schema for a deposit or withdrawal."""

    amount: FormNumber = Field(default=None, description="Positive magnitude")
    type: CashTransactionType = Field(default=CashTransactionType.DEPOSIT)
    date: Optional[str] = Field(default=None, description="Defaults to today (US/Eastern)")


class CashTransactionResponse(BaseModel):
    """Response schema for a single cash transaction."""

    id: str
    date: str
    amount: float
    type: CashTransactionType

    @classmethod
    def from_domain(cls, txn: CashTransaction) -> "CashTransactionResponse":
        return cls(
            id=txn.txn_id,
            date=txn.date,
            amount=float(txn.amount),
            type=txn.type,
        )


class CashTransactionListResponse(BaseModel):
    """Cash transactions, newest first, with the running balance."""

    items: list[CashTransactionResponse]
    total: int
    balance: float
