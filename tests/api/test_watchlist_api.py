"""
API tests for /watchlist.
"""

import pytest
from fastapi.testclient import TestClient


class TestWatchlistAPI:
    def test_default_watchlist(self, client: TestClient):
        """
        GIVEN a fresh install
        WHEN I GET /watchlist
        THEN all default symbols are listed, items only where a quote exists
        """
        data = client.get("/watchlist").json()

        assert data["symbols"][:5] == ["^GSPC", "^DJI", "^IXIC", "^RUT", "^VIX"]
        item_symbols = [i["symbol"] for i in data["items"]]
        assert item_symbols == ["^GSPC", "^DJI", "AAPL", "MSFT", "GOOGL"]
        assert "AAPL" not in data["available_presets"]

    def test_item_change_fields(self, client: TestClient):
        items = {i["symbol"]: i for i in client.get("/watchlist").json()["items"]}

        gspc = items["^GSPC"]
        assert gspc["name"] == "S&P 500"
        assert gspc["is_index"] is True

        aapl = items["AAPL"]
        assert aapl["is_index"] is False
        assert aapl["change"] == pytest.approx(1.25)
        assert aapl["change_percent"] == pytest.approx(1.25 / 184.25 * 100)

    def test_add_symbol(self, client: TestClient):
        response = client.post("/watchlist", json={"symbol": "tsla"})

        assert response.status_code == 201
        data = response.json()
        assert data["symbols"][-1] == "TSLA"
        assert "TSLA" in [i["symbol"] for i in data["items"]]
        assert "TSLA" not in data["available_presets"]

    def test_add_blank_symbol(self, client: TestClient):
        response = client.post("/watchlist", json={"symbol": " "})

        assert response.status_code == 400
        assert response.json()["error"] == "MISSING_FIELD"

    def test_remove_symbol(self, client: TestClient):
        response = client.delete("/watchlist/^VIX")

        assert response.status_code == 204
        assert "^VIX" not in client.get("/watchlist").json()["symbols"]

    def test_remove_unknown(self, client: TestClient):
        response = client.delete("/watchlist/ZZZZ")

        assert response.status_code == 404
