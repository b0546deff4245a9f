"""Price history views for the chart screen."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Timeframe:
    """A selectable chart window: how far back (period) and bar size (interval)."""

    key: str
    label: str
    period: str
    interval: str


TIMEFRAMES: dict[str, Timeframe] = {
    tf.key: tf
    for tf in (
        Timeframe("1d", "1D", "1d", "5m"),
        Timeframe("5d", "5D", "5d", "15m"),
        Timeframe("1m", "1M", "1mo", "1d"),
        Timeframe("6m", "6M", "6mo", "1d"),
        Timeframe("1y", "1Y", "1y", "1d"),
        Timeframe("2y", "2Y", "2y", "1d"),
        Timeframe("5y", "5Y", "5y", "1d"),
        Timeframe("max", "MAX", "max", "1d"),
    )
}

DEFAULT_TIMEFRAME = "1d"


@dataclass(frozen=True)
class PricePoint:
    """One bar. Close is always present; the other fields may be missing upstream."""

    timestamp: datetime
    close: Decimal
    open: Optional[Decimal] = None
    high: Optional[Decimal] = None
    low: Optional[Decimal] = None


@dataclass
class PriceHistory:
    symbol: str
    timeframe: Timeframe
    points: list[PricePoint] = field(default_factory=list)

    @property
    def closes(self) -> list[Decimal]:
        return [p.close for p in self.points]

    @property
    def first_close(self) -> Optional[Decimal]:
        return self.points[0].close if self.points else None

    @property
    def last_close(self) -> Optional[Decimal]:
        return self.points[-1].close if self.points else None

    @property
    def change(self) -> Decimal:
        """Last close minus first close over the window."""
        if not self.points:
            return Decimal("0")
        return self.points[-1].close - self.points[0].close

    @property
    def change_percent(self) -> Decimal:
        first = self.first_close
        if first is None or first == 0:
            return Decimal("0")
        return self.change / first * 100
