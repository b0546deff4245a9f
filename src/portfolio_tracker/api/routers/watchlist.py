"""Watchlist API."""

from decimal import Decimal

from fastapi import APIRouter, Depends, Response

from portfolio_tracker.api.deps import get_watchlist_service
from portfolio_tracker.api.schemas.watchlist import (
    WatchlistItem,
    WatchlistResponse,
    WatchlistAddRequest,
)
from portfolio_tracker.services import WatchlistService
from portfolio_tracker.services.watchlist_service import MARKET_INDICES

router = APIRouter(prefix="/watchlist", tags=["watchlist"])


def _build_response(service: WatchlistService) -> WatchlistResponse:
    quotes = service.quotes()
    items = []
    for symbol in service.list_symbols():
        quote = quotes.get(symbol)
        if quote is None:
            continue
        change = quote.price - quote.previous_close
        change_percent = (
            float(change / quote.previous_close * 100)
            if quote.previous_close != Decimal("0")
            else None
        )
        items.append(
            WatchlistItem(
                symbol=symbol,
                name=MARKET_INDICES.get(symbol) or quote.name or symbol,
                is_index=symbol in MARKET_INDICES,
                price=float(quote.price),
                previous_close=float(quote.previous_close),
                change=float(change),
                change_percent=change_percent,
            )
        )
    return WatchlistResponse(
        items=items,
        symbols=service.list_symbols(),
        available_presets=service.available_presets(),
    )


@router.get("", response_model=WatchlistResponse)
def get_watchlist(service: WatchlistService = Depends(get_watchlist_service)):
    """Watched symbols with quotes; symbols lacking a quote are omitted from items."""
    return _build_response(service)


@router.post("", response_model=WatchlistResponse, status_code=201)
def add_to_watchlist(
    body: WatchlistAddRequest,
    service: WatchlistService = Depends(get_watchlist_service),
):
    service.add(body.symbol)
    return _build_response(service)


@router.delete("/{symbol}", status_code=204)
def remove_from_watchlist(
    symbol: str,
    service: WatchlistService = Depends(get_watchlist_service),
) -> Response:
    service.remove(symbol)
    return Response(status_code=204)
