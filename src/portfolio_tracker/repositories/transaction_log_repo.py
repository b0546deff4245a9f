"""JSON persistence of the transaction logs and watchlist on a key-value store."""

import logging
from decimal import Decimal
from typing import Any, Optional

import simplejson

from portfolio_tracker.domain.models import Transaction, CashTransaction
from portfolio_tracker.repositories.protocols import KeyValueStore

logger = logging.getLogger(__name__)

TRANSACTIONS_KEY = "portfolio_transactions"
CASH_TRANSACTIONS_KEY = "cash_transactions"
WATCHLIST_KEY = "watchlist"


def dumps(data: Any) -> str:
    # Decimals are written as bare JSON number literals, digit for digit.
    return simplejson.dumps(data, use_decimal=True)


def loads(text: str) -> Any:
    return simplejson.loads(text, use_decimal=True, allow_nan=True, parse_constant=Decimal)


class TransactionLogRepository:
    """
    Loads and saves each log as one JSON array under a fixed key.

    Entries written before ids existed are given one on load; the id is
    persisted on the next save.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_transactions(self) -> list[Transaction]:
        return [Transaction.from_dict(item) for item in self._load_list(TRANSACTIONS_KEY)]

    def save_transactions(self, transactions: list[Transaction]) -> None:
        self._store.set(TRANSACTIONS_KEY, dumps([t.to_dict() for t in transactions]))

    def load_cash_transactions(self) -> list[CashTransaction]:
        return [CashTransaction.from_dict(item) for item in self._load_list(CASH_TRANSACTIONS_KEY)]

    def save_cash_transactions(self, cash_transactions: list[CashTransaction]) -> None:
        self._store.set(CASH_TRANSACTIONS_KEY, dumps([c.to_dict() for c in cash_transactions]))

    def load_watchlist(self) -> Optional[list[str]]:
        """Return the saved watchlist, or None if none was ever saved."""
        if self._store.get(WATCHLIST_KEY) is None:
            return None
        return [str(symbol) for symbol in self._load_list(WATCHLIST_KEY)]

    def save_watchlist(self, symbols: list[str]) -> None:
        self._store.set(WATCHLIST_KEY, dumps(symbols))

    def _load_list(self, key: str) -> list[Any]:
        raw = self._store.get(key)
        if not raw:
            return []
        data = loads(raw)
        if not isinstance(data, list):
            logger.warning("Ignoring non-list value stored under %s", key)
            return []
        return data
