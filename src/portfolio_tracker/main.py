"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from portfolio_tracker.config.settings import get_settings
from portfolio_tracker.config.logging_config import setup_logging
from portfolio_tracker.repositories.sqlalchemy.database import init_db
from portfolio_tracker.api.routers import (
    transactions_router,
    cash_router,
    portfolio_router,
    watchlist_router,
    chart_router,
)
from portfolio_tracker.core.exceptions import (
    AppError,
    IndexOutOfRangeError,
    MarketDataUnavailableError,
    NotFoundError,
    ValidationError,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Local-first holdings aggregation and portfolio valuation",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(transactions_router)
app.include_router(cash_router)
app.include_router(portfolio_router)
app.include_router(watchlist_router)
app.include_router(chart_router)


def _status_for(exc: AppError) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, IndexOutOfRangeError):
        return 500
    if isinstance(exc, MarketDataUnavailableError):
        return 503
    return 400


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=_status_for(exc),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
