"""Pydantic schemas for watchlist endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class WatchlistItem(BaseModel):
    """A watched symbol with its latest quote."""

    symbol: str
    name: str
    is_index: bool
    price: float
    previous_close: float
    change: float
    change_percent: Optional[float] = None


class WatchlistResponse(BaseModel):
    """Watched symbols that currently have a quote, plus presets not yet added."""

    items: list[WatchlistItem]
    symbols: list[str]
    available_presets: list[str]


class WatchlistAddRequest(BaseModel):
    symbol: str = Field(..., max_length=20)
