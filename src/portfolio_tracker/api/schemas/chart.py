"""Pydantic schemas for the chart endpoint."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from portfolio_tracker.domain.views import PriceHistory, PricePoint


def _opt(value) -> Optional[float]:
    return float(value) if value is not None else None


class PricePointResponse(BaseModel):
    timestamp: datetime
    close: float
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None

    @classmethod
    def from_domain(cls, point: PricePoint) -> "PricePointResponse":
        return cls(
            timestamp=point.timestamp,
            close=float(point.close),
            open=_opt(point.open),
            high=_opt(point.high),
            low=_opt(point.low),
        )


class PriceHistoryResponse(BaseModel):
    """Bars for one symbol over one timeframe, oldest first."""

    symbol: str
    timeframe: str
    period: str
    interval: str
    points: list[PricePointResponse]
    change: float
    change_percent: float

    @classmethod
    def from_domain(cls, history: PriceHistory) -> "PriceHistoryResponse":
        return cls(
            symbol=history.symbol,
            timeframe=history.timeframe.key,
            period=history.timeframe.period,
            interval=history.timeframe.interval,
            points=[PricePointResponse.from_domain(p) for p in history.points],
            change=float(history.change),
            change_percent=float(history.change_percent),
        )


class TimeframeResponse(BaseModel):
    key: str
    label: str
    period: str
    interval: str
