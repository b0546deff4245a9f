"""Transaction and CashTransaction domain models."""

import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from portfolio_tracker.domain.models.enums import CashTransactionType


def new_txn_id() -> str:
    """Return a fresh synthetic transaction identifier."""
    return str(uuid.uuid4())


def to_decimal(value: Any) -> Decimal:
    """Convert a stored numeric value to Decimal without float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Transaction:
    """
    Trade log entry (source of truth for instrument holdings).

    - shares is signed: positive = acquired, negative = disposed
    - ticker is stored uppercase; grouping relies on exact match
    - never edited, only appended or deleted
    """

    ticker: str
    date: str
    shares: Decimal
    price: Decimal
    txn_id: str = field(default_factory=new_txn_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.txn_id,
            "ticker": self.ticker,
            "date": self.date,
            "shares": self.shares,
            "price": self.price,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transaction":
        return cls(
            ticker=data["ticker"],
            date=data["date"],
            shares=to_decimal(data["shares"]),
            price=to_decimal(data["price"]),
            txn_id=data.get("id") or new_txn_id(),
        )


@dataclass(frozen=True)
class CashTransaction:
    """
    Deposit into or withdrawal from the portfolio's cash sub-account.

    amount carries the sign (positive deposit, negative withdrawal).
    """

    date: str
    amount: Decimal
    type: CashTransactionType
    txn_id: str = field(default_factory=new_txn_id)

    def __post_init__(self) -> None:
        if isinstance(self.type, str) and not isinstance(self.type, CashTransactionType):
            object.__setattr__(self, "type", CashTransactionType(self.type))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.txn_id,
            "date": self.date,
            "amount": self.amount,
            "type": self.type.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CashTransaction":
        return cls(
            date=data["date"],
            amount=to_decimal(data["amount"]),
            type=CashTransactionType(data["type"]),
            txn_id=data.get("id") or new_txn_id(),
        )
