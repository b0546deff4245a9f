"""API request/response schemas."""

from portfolio_tracker.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    TransactionListResponse,
    CashTransactionCreateRequest,
    CashTransactionResponse,
    CashTransactionListResponse,
)
from portfolio_tracker.api.schemas.portfolio import (
    ValuedHoldingResponse,
    PortfolioTotalsResponse,
    AllocationItemResponse,
    PortfolioResponse,
)
from portfolio_tracker.api.schemas.watchlist import (
    WatchlistItem,
    WatchlistResponse,
    WatchlistAddRequest,
)
from portfolio_tracker.api.schemas.chart import (
    PricePointResponse,
    PriceHistoryResponse,
    TimeframeResponse,
)

__all__ = [
    "TransactionCreateRequest",
    "TransactionResponse",
    "TransactionListResponse",
    "CashTransactionCreateRequest",
    "CashTransactionResponse",
    "CashTransactionListResponse",
    "ValuedHoldingResponse",
    "PortfolioTotalsResponse",
    "AllocationItemResponse",
    "PortfolioResponse",
    "WatchlistItem",
    "WatchlistResponse",
    "WatchlistAddRequest",
    "PricePointResponse",
    "PriceHistoryResponse",
    "TimeframeResponse",
]
