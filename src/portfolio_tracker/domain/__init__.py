"""Domain layer - pure business models with no external dependencies."""

from portfolio_tracker.domain.models import (
    Transaction,
    CashTransaction,
    CashTransactionType,
)
from portfolio_tracker.domain.views import (
    InstrumentHolding,
    CashHolding,
    Holding,
    Quote,
)

__all__ = [
    "Transaction",
    "CashTransaction",
    "CashTransactionType",
    "InstrumentHolding",
    "CashHolding",
    "Holding",
    "Quote",
]
