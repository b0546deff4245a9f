"""Repository layer - data access abstractions and implementations."""

from portfolio_tracker.repositories.protocols import KeyValueStore
from portfolio_tracker.repositories.transaction_log_repo import TransactionLogRepository

__all__ = [
    "KeyValueStore",
    "TransactionLogRepository",
]
