"""Domain models package."""

from portfolio_tracker.domain.models.enums import CashTransactionType
from portfolio_tracker.domain.models.transaction import (
    Transaction,
    CashTransaction,
    new_txn_id,
    to_decimal,
)

__all__ = [
    "CashTransactionType",
    "Transaction",
    "CashTransaction",
    "new_txn_id",
    "to_decimal",
]
