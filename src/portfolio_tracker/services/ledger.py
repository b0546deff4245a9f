"""
Immutable-update operations on the persisted transaction logs.

Every function returns a new list and leaves the caller's list untouched,
so screens reading the same log never observe a half-applied change.
Storage order is insertion order; display order is newest first.
"""

from typing import Sequence, TypeVar

from portfolio_tracker.core.exceptions import IndexOutOfRangeError, NotFoundError
from portfolio_tracker.domain.models import Transaction, CashTransaction

LogEntry = TypeVar("LogEntry", Transaction, CashTransaction)


def add_transaction(log: Sequence[LogEntry], txn: LogEntry) -> list[LogEntry]:
    """Append txn to the end of the log."""
    return [*log, txn]


def delete_transaction(log: Sequence[LogEntry], index: int) -> list[LogEntry]:
    """Remove the entry at 0-based storage index."""
    if index < 0 or index >= len(log):
        raise IndexOutOfRangeError(index, len(log))
    return [*log[:index], *log[index + 1:]]


def storage_index(length: int, display_index: int) -> int:
    """Map a row of the newest-first display back to its storage index."""
    if display_index < 0 or display_index >= length:
        raise IndexOutOfRangeError(display_index, length)
    return length - 1 - display_index


def display_order(log: Sequence[LogEntry]) -> list[LogEntry]:
    """Return the log newest first, as the transaction lists render it."""
    return list(reversed(log))


def delete_displayed_transaction(log: Sequence[LogEntry], display_index: int) -> list[LogEntry]:
    """Remove the entry shown at display_index in the newest-first list."""
    return delete_transaction(log, storage_index(len(log), display_index))


def delete_transaction_by_id(log: Sequence[LogEntry], txn_id: str) -> list[LogEntry]:
    """Remove the entry with the given synthetic id."""
    for index, txn in enumerate(log):
        if txn.txn_id == txn_id:
            return delete_transaction(log, index)
    raise NotFoundError("Transaction", txn_id)

