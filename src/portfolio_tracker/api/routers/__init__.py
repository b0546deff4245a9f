"""API routers package."""

from portfolio_tracker.api.routers.transactions import router as transactions_router
from portfolio_tracker.api.routers.cash import router as cash_router
from portfolio_tracker.api.routers.portfolio import router as portfolio_router
from portfolio_tracker.api.routers.watchlist import router as watchlist_router
from portfolio_tracker.api.routers.chart import router as chart_router

__all__ = [
    "transactions_router",
    "cash_router",
    "portfolio_router",
    "watchlist_router",
    "chart_router",
]
