"""
API tests for /chart.
"""

import pytest
from fastapi.testclient import TestClient

from portfolio_tracker.api.deps import get_price_history_service
from portfolio_tracker.main import app
from portfolio_tracker.services import PriceHistoryService

from tests.conftest import FailingMarketProvider


class TestChartAPI:
    def test_default_timeframe(self, client: TestClient):
        """
        GIVEN the seeded stub provider
        WHEN I GET /chart/AAPL without a timeframe
        THEN one day of 5 minute bars comes back, ending at the stub price
        """
        response = client.get("/chart/aapl")

        assert response.status_code == 200
        data = response.json()
        assert data["symbol"] == "AAPL"
        assert data["timeframe"] == "1d"
        assert (data["period"], data["interval"]) == ("1d", "5m")
        assert len(data["points"]) == 78
        assert data["points"][-1]["close"] == pytest.approx(185.5)
        assert set(data["points"][0]) == {"timestamp", "close", "open", "high", "low"}

    def test_named_timeframe(self, client: TestClient):
        data = client.get("/chart/MSFT", params={"timeframe": "6m"}).json()

        assert (data["period"], data["interval"]) == ("6mo", "1d")
        assert len(data["points"]) == 126
        first, last = data["points"][0]["close"], data["points"][-1]["close"]
        assert data["change"] == pytest.approx(last - first, abs=0.01)

    def test_index_symbol(self, client: TestClient):
        data = client.get("/chart/^GSPC", params={"timeframe": "5d"}).json()

        assert data["symbol"] == "^GSPC"
        assert data["points"][-1]["close"] == pytest.approx(5431.6)

    def test_unknown_timeframe(self, client: TestClient):
        response = client.get("/chart/AAPL", params={"timeframe": "3w"})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_TIMEFRAME"

    def test_provider_down(self, client: TestClient):
        app.dependency_overrides[get_price_history_service] = lambda: PriceHistoryService(
            FailingMarketProvider()
        )

        response = client.get("/chart/AAPL")

        assert response.status_code == 503
        assert response.json()["error"] == "MARKET_DATA_UNAVAILABLE"

    def test_list_timeframes(self, client: TestClient):
        keys = [tf["key"] for tf in client.get("/chart/timeframes").json()]

        assert keys == ["1d", "5d", "1m", "6m", "1y", "2y", "5y", "max"]
