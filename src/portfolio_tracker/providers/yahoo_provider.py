"""
Yahoo Finance quotes and price history via yfinance.

Per-symbol failures are omitted from the result; a timed-out batch returns
an empty result so the market data service can fall back to its cache.
History bars without a close are dropped.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FuturesTimeoutError
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Optional, TypeVar

from portfolio_tracker.core.timezone import now_eastern
from portfolio_tracker.domain.views import PricePoint, Quote, Timeframe

logger = logging.getLogger(__name__)

DEFAULT_FETCH_TIMEOUT_SECONDS = 10.0

T = TypeVar("T")


# Lazy import so tests can patch before import
def _get_yf():
    import yfinance as yf
    return yf


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _quote_from_info(symbol: str, info: Any) -> Optional[Quote]:
    """
    Build a Quote from a yfinance info dict.

    Price: currentPrice, then regularMarketPrice. Previous close:
    previousClose, then regularMarketPreviousClose, then the price itself.
    """
    if not isinstance(info, dict):
        return None

    price = _to_decimal(info.get("currentPrice"))
    if price is None:
        price = _to_decimal(info.get("regularMarketPrice"))
    if price is None:
        return None

    previous_close = _to_decimal(info.get("previousClose"))
    if previous_close is None:
        previous_close = _to_decimal(info.get("regularMarketPreviousClose"))
    if previous_close is None:
        previous_close = price

    name = (info.get("longName") or info.get("shortName") or "").strip() or symbol
    return Quote(
        symbol=symbol,
        price=price,
        previous_close=previous_close,
        name=name,
        as_of=now_eastern(),
    )


def _fetch_quotes_impl(symbols: list[str]) -> dict[str, Quote]:
    """Call yfinance once for the batch. No cache."""
    yf = _get_yf()
    tickers = yf.Tickers(" ".join(symbols))
    result: dict[str, Quote] = {}
    for symbol in symbols:
        ticker = tickers.tickers.get(symbol)
        if ticker is None:
            continue
        try:
            quote = _quote_from_info(symbol, ticker.info)
        except Exception as e:
            logger.warning("Quote lookup failed for %s: %s", symbol, e)
            continue
        if quote is not None:
            result[symbol] = quote
    return result


def _bar_timestamp(idx: Any) -> Optional[datetime]:
    if hasattr(idx, "to_pydatetime"):
        return idx.to_pydatetime()
    if isinstance(idx, datetime):
        return idx
    return None


def _points_from_history(hist: Any) -> list[PricePoint]:
    """Turn a yfinance history frame into points, skipping bars with no close."""
    points: list[PricePoint] = []
    if hist is None or hist.empty:
        return points
    for idx, row in hist.iterrows():
        timestamp = _bar_timestamp(idx)
        close = _to_decimal(row.get("Close", None))
        if timestamp is None or close is None:
            continue
        points.append(
            PricePoint(
                timestamp=timestamp,
                close=close,
                open=_to_decimal(row.get("Open", None)),
                high=_to_decimal(row.get("High", None)),
                low=_to_decimal(row.get("Low", None)),
            )
        )
    return points


def _fetch_history_impl(symbol: str, timeframe: Timeframe) -> list[PricePoint]:
    """Call yfinance for one symbol's bars. No cache."""
    yf = _get_yf()
    try:
        hist = yf.Ticker(symbol).history(
            period=timeframe.period,
            interval=timeframe.interval,
            prepost=True,
            auto_adjust=False,
        )
    except Exception as e:
        logger.warning("History lookup failed for %s (%s): %s", symbol, timeframe.key, e)
        return []
    return _points_from_history(hist)


class YahooFinanceProvider:
    """Fetches quotes and price history from Yahoo Finance, bounded by a timeout."""

    def __init__(self, fetch_timeout_seconds: float = DEFAULT_FETCH_TIMEOUT_SECONDS):
        self._fetch_timeout = fetch_timeout_seconds

    def _call_with_timeout(self, fn: Callable[..., T], *args: Any, default: T, what: str) -> T:
        ex = ThreadPoolExecutor(max_workers=1)
        try:
            fut = ex.submit(fn, *args)
            return fut.result(timeout=self._fetch_timeout)
        except FuturesTimeoutError:
            logger.warning("%s timed out after %ss", what, self._fetch_timeout)
            return default
        finally:
            # Do not block on a hung request
            ex.shutdown(wait=False)

    def get_quotes(self, symbols: list[str]) -> dict[str, Quote]:
        symbols = [s.strip().upper() for s in symbols if s and s.strip()]
        if not symbols:
            return {}
        return self._call_with_timeout(
            _fetch_quotes_impl,
            symbols,
            default={},
            what=f"Quote fetch for {len(symbols)} symbols",
        )

    def get_price_history(self, symbol: str, timeframe: Timeframe) -> list[PricePoint]:
        symbol = (symbol or "").strip().upper()
        if not symbol:
            return []
        return self._call_with_timeout(
            _fetch_history_impl,
            symbol,
            timeframe,
            default=[],
            what=f"History fetch for {symbol} ({timeframe.key})",
        )
