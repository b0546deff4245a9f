"""Stub market data provider for offline/testing use."""

import random
from datetime import timedelta
from decimal import Decimal

from portfolio_tracker.core.timezone import now_eastern
from portfolio_tracker.domain.views import PricePoint, Quote, Timeframe


# Deterministic fake prices for common symbols
_STUB_PRICES: dict[str, tuple[Decimal, Decimal]] = {
    "AAPL": (Decimal("185.50"), Decimal("184.25")),
    "GOOGL": (Decimal("142.75"), Decimal("141.50")),
    "MSFT": (Decimal("378.25"), Decimal("376.80")),
    "AMZN": (Decimal("178.50"), Decimal("177.25")),
    "TSLA": (Decimal("248.75"), Decimal("250.10")),
    "NVDA": (Decimal("485.25"), Decimal("482.50")),
    "META": (Decimal("505.50"), Decimal("502.75")),
    "SPY": (Decimal("485.25"), Decimal("484.10")),
    "^GSPC": (Decimal("5431.60"), Decimal("5421.03")),
    "^DJI": (Decimal("38589.16"), Decimal("38647.10")),
    "^IXIC": (Decimal("17688.88"), Decimal("17667.56")),
}

# Bars per timeframe period, roughly one trading session of 5m bars for 1d
_STUB_BAR_COUNTS: dict[str, int] = {
    "1d": 78,
    "5d": 130,
    "1mo": 21,
    "6mo": 126,
    "1y": 252,
    "2y": 504,
    "5y": 1260,
    "max": 2520,
}

_STUB_INTERVALS: dict[str, timedelta] = {
    "5m": timedelta(minutes=5),
    "15m": timedelta(minutes=15),
    "1d": timedelta(days=1),
}


class StubMarketDataProvider:
    """
    Stub provider with deterministic fake data for offline operation.

    Uses predefined prices for common symbols; generates seeded random prices for unknown symbols.
    Price history is a seeded random walk that ends at the quoted price.
    """

    def __init__(self, seed: int = 42):
        self._seed = seed
        self._rng = random.Random(seed)

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        """Return stub quotes for requested symbols."""
        as_of = now_eastern()
        result: dict[str, Quote] = {}

        for symbol in symbols:
            upper_symbol = symbol.upper()
            if upper_symbol in _STUB_PRICES:
                price, previous_close = _STUB_PRICES[upper_symbol]
            else:
                base_price = Decimal(str(50 + self._rng.random() * 200))
                price = base_price.quantize(Decimal("0.01"))
                change_pct = Decimal(str((self._rng.random() - 0.5) * 0.04))
                previous_close = (price / (1 + change_pct)).quantize(Decimal("0.01"))

            result[upper_symbol] = Quote(
                symbol=upper_symbol,
                price=price,
                previous_close=previous_close,
                name=upper_symbol,
                as_of=as_of,
            )

        return result

    def get_price_history(self, symbol: str, timeframe: Timeframe) -> list[PricePoint]:
        """Return a deterministic walk of bars ending at the stub price, oldest first."""
        symbol = (symbol or "").strip().upper()
        if not symbol:
            return []

        count = _STUB_BAR_COUNTS.get(timeframe.period, 30)
        step = _STUB_INTERVALS.get(timeframe.interval, timedelta(days=1))
        # Same symbol and timeframe always give the same series
        rng = random.Random(f"{self._seed}:{symbol}:{timeframe.key}")
        end = now_eastern().replace(second=0, microsecond=0)

        if symbol in _STUB_PRICES:
            last = _STUB_PRICES[symbol][0]
        else:
            last = Decimal(str(50 + rng.random() * 200)).quantize(Decimal("0.01"))

        closes = [last]
        for _ in range(count - 1):
            drift = Decimal(str((rng.random() - 0.5) * 0.02))
            closes.append((closes[-1] / (1 + drift)).quantize(Decimal("0.01")))
        closes.reverse()

        points: list[PricePoint] = []
        for i, close in enumerate(closes):
            open_ = closes[i - 1] if i > 0 else close
            points.append(
                PricePoint(
                    timestamp=end - step * (count - 1 - i),
                    close=close,
                    open=open_,
                    high=max(open_, close),
                    low=min(open_, close),
                )
            )
        return points
