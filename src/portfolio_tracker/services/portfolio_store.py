"""Portfolio store: single owner of the transaction logs and latest quotes."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable, Mapping, Optional, Union

from portfolio_tracker.domain.models import Transaction, CashTransaction, CashTransactionType
from portfolio_tracker.domain.views import (
    Holding,
    Quote,
    PortfolioValuation,
    AllocationView,
)
from portfolio_tracker.repositories.transaction_log_repo import TransactionLogRepository
from portfolio_tracker.services import ledger
from portfolio_tracker.services.holdings_engine import (
    aggregate_holdings,
    value_holdings,
    allocation,
)
from portfolio_tracker.services.market_data_service import MarketDataService
from portfolio_tracker.services.validation import (
    RawNumber,
    validate_trade_input,
    build_cash_transaction,
)

logger = logging.getLogger(__name__)


@dataclass
class PortfolioSnapshot:
    """Everything a screen needs, derived from one version of the logs and quotes."""

    transactions: list[Transaction] = field(default_factory=list)
    cash_transactions: list[CashTransaction] = field(default_factory=list)
    holdings: list[Holding] = field(default_factory=list)
    valuation: PortfolioValuation = field(default_factory=PortfolioValuation)
    allocation: AllocationView = field(default_factory=AllocationView)
    cash_balance: Decimal = field(default_factory=lambda: Decimal("0"))


Listener = Callable[[PortfolioSnapshot], None]


class PortfolioStore:
    """
    Observable store for the trade log, the cash log and the quote map.

    Every consumer reads through this store and subscribes for changes,
    so no screen has to tell another one to refresh. Holdings and valuation
    are recomputed from the most recent log and the most recent quotes on
    every read; nothing derived is cached.
    """

    def __init__(self, repository: TransactionLogRepository):
        self._repo = repository
        self._transactions: list[Transaction] = repository.load_transactions()
        self._cash_transactions: list[CashTransaction] = repository.load_cash_transactions()
        self._quotes: dict[str, Quote] = {}
        self._listeners: list[Listener] = []

    # Subscription

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # Reads

    @property
    def transactions(self) -> list[Transaction]:
        """Trade log in storage (insertion) order."""
        return list(self._transactions)

    @property
    def cash_transactions(self) -> list[CashTransaction]:
        """Cash log in storage (insertion) order."""
        return list(self._cash_transactions)

    @property
    def quotes(self) -> dict[str, Quote]:
        return dict(self._quotes)

    def symbols(self) -> list[str]:
        """Tickers that appear in the trade log, sorted."""
        return sorted({t.ticker for t in self._transactions})

    def cash_balance(self) -> Decimal:
        return sum((c.amount for c in self._cash_transactions), Decimal("0"))

    def holdings(self) -> list[Holding]:
        return aggregate_holdings(self._transactions, self._cash_transactions)

    def valuation(self) -> PortfolioValuation:
        return value_holdings(self.holdings(), self._quotes)

    def snapshot(self) -> PortfolioSnapshot:
        holdings = self.holdings()
        valuation = value_holdings(holdings, self._quotes)
        return PortfolioSnapshot(
            transactions=self.transactions,
            cash_transactions=self.cash_transactions,
            holdings=holdings,
            valuation=valuation,
            allocation=allocation(valuation),
            cash_balance=self.cash_balance(),
        )

    # Trade log mutations

    def add_trade(
        self,
        ticker: Optional[str],
        date: Optional[str],
        shares: RawNumber,
        price: RawNumber,
    ) -> Transaction:
        """Validate and append a trade. Invalid input leaves the log untouched."""
        txn = validate_trade_input(ticker, date, shares, price)
        self._set_transactions(ledger.add_transaction(self._transactions, txn))
        logger.info("Added %s %s @ %s (%s)", txn.ticker, txn.shares, txn.price, txn.txn_id)
        return txn

    def delete_trade(self, txn_id: str) -> None:
        self._set_transactions(ledger.delete_transaction_by_id(self._transactions, txn_id))
        logger.info("Deleted transaction %s", txn_id)

    def delete_trade_at(self, display_index: int) -> Transaction:
        """Delete the trade shown at display_index in the newest-first list."""
        index = ledger.storage_index(len(self._transactions), display_index)
        removed = self._transactions[index]
        self._set_transactions(ledger.delete_transaction(self._transactions, index))
        logger.info("Deleted transaction %s", removed.txn_id)
        return removed

    # Cash log mutations

    def add_cash(
        self,
        amount: RawNumber,
        txn_type: Union[CashTransactionType, str] = CashTransactionType.DEPOSIT,
        date: Optional[str] = None,
    ) -> CashTransaction:
        """Validate and append a deposit or withdrawal."""
        cash_txn = build_cash_transaction(amount, txn_type, date)
        self._set_cash_transactions(ledger.add_transaction(self._cash_transactions, cash_txn))
        logger.info("Added cash %s %s (%s)", cash_txn.type.value, cash_txn.amount, cash_txn.txn_id)
        return cash_txn

    def delete_cash(self, txn_id: str) -> None:
        self._set_cash_transactions(
            ledger.delete_transaction_by_id(self._cash_transactions, txn_id)
        )
        logger.info("Deleted cash transaction %s", txn_id)

    def delete_cash_at(self, display_index: int) -> CashTransaction:
        """Delete the cash transaction shown at display_index in the newest-first list."""
        index = ledger.storage_index(len(self._cash_transactions), display_index)
        removed = self._cash_transactions[index]
        self._set_cash_transactions(ledger.delete_transaction(self._cash_transactions, index))
        logger.info("Deleted cash transaction %s", removed.txn_id)
        return removed

    # Quotes

    def update_quotes(self, quotes: Mapping[str, Quote]) -> None:
        """Merge a freshly fetched quote map over the previous one."""
        self._quotes = {**self._quotes, **quotes}
        self._notify()

    def refresh_quotes(self, market_data: MarketDataService) -> dict[str, Quote]:
        """Fetch quotes for every held ticker and publish them."""
        symbols = self.symbols()
        if not symbols:
            return {}
        quotes = market_data.get_quotes(symbols)
        missing = [s for s in symbols if s not in quotes]
        if missing:
            logger.info("No quote for %s; valuing at zero", ", ".join(missing))
        self.update_quotes(quotes)
        return quotes

    # Persistence

    def _set_transactions(self, transactions: list[Transaction]) -> None:
        self._repo.save_transactions(transactions)
        self._transactions = transactions
        self._notify()

    def _set_cash_transactions(self, cash_transactions: list[CashTransaction]) -> None:
        self._repo.save_cash_transactions(cash_transactions)
        self._cash_transactions = cash_transactions
        self._notify()
