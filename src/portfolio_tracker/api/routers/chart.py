"""Chart API: price history per symbol."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from portfolio_tracker.api.deps import get_price_history_service
from portfolio_tracker.api.schemas.chart import PriceHistoryResponse, TimeframeResponse
from portfolio_tracker.domain.views import TIMEFRAMES
from portfolio_tracker.services import PriceHistoryService

router = APIRouter(prefix="/chart", tags=["chart"])


@router.get("/timeframes", response_model=list[TimeframeResponse])
def list_timeframes():
    return [
        TimeframeResponse(key=tf.key, label=tf.label, period=tf.period, interval=tf.interval)
        for tf in TIMEFRAMES.values()
    ]


@router.get("/{symbol}", response_model=PriceHistoryResponse)
def get_chart(
    symbol: str,
    timeframe: Optional[str] = Query(None, description="1d, 5d, 1m, 6m, 1y, 2y, 5y or max"),
    service: PriceHistoryService = Depends(get_price_history_service),
):
    """Bars with a close for the symbol; 404 when there are none."""
    history = service.get_history(symbol, timeframe)
    return PriceHistoryResponse.from_domain(history)
