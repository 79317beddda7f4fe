"""Tests for the dashboard JSON API.

Services on app.state are wired by hand: the history path uses a real
HistoricalDataService over a mocked client, the catalog and analysis
service are mocks.
"""

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from coinlens.analysis.models import AnalysisResult
from coinlens.analysis.service import AnalysisService
from coinlens.dashboard.app import create_dashboard_app
from coinlens.exceptions import (
    AnalysisUnavailableError,
    HistoricalDataError,
    SourceUnavailableError,
)
from coinlens.indicators.models import HistoricalData
from coinlens.indicators.pipeline import IndicatorPipeline
from coinlens.market_data.catalog import CoinCatalog
from coinlens.market_data.client import MarketDataClient
from coinlens.market_data.coingecko_client import CoinGeckoClient
from coinlens.market_data.history import HistoricalDataService
from coinlens.models import FALLBACK_COINS, Coin


@pytest.fixture
def market_client() -> AsyncMock:
    return AsyncMock(spec=MarketDataClient)


@pytest.fixture
def analysis_service() -> MagicMock:
    service = MagicMock(spec=AnalysisService)
    service.analyze = AsyncMock()
    return service


@pytest.fixture
def client(market_client, analysis_service, indicator_settings) -> TestClient:
    app = create_dashboard_app()
    app.state.history_service = HistoricalDataService(
        market_client, IndicatorPipeline(indicator_settings)
    )
    app.state.catalog = CoinCatalog(market_client, fallback=FALLBACK_COINS, listing_size=5)
    app.state.analysis_service = analysis_service
    return TestClient(app)


class TestCoinsEndpoints:
    """Tests for /api/coins, /api/coins/search and /api/timeframes."""

    def test_timeframes(self, client) -> None:
        response = client.get("/api/timeframes")

        assert response.status_code == 200
        assert [t["days"] for t in response.json()] == [1, 7, 30, 90]

    def test_list_coins(self, client, market_client) -> None:
        market_client.fetch_top_coins.return_value = [
            Coin(id="bitcoin", name="Bitcoin", ticker="BTC")
        ]

        response = client.get("/api/coins")

        assert response.status_code == 200
        assert response.json() == [{"id": "bitcoin", "name": "Bitcoin", "ticker": "BTC"}]

    def test_list_coins_fallback(self, client, market_client) -> None:
        market_client.fetch_top_coins.side_effect = SourceUnavailableError("down")

        response = client.get("/api/coins")

        assert [c["id"] for c in response.json()] == ["bitcoin", "ethereum", "solana", "ripple"]

    def test_search(self, client, market_client) -> None:
        market_client.search_coins.return_value = [
            Coin(id="dogecoin", name="Dogecoin", ticker="DOGE")
        ]

        response = client.get("/api/coins/search", params={"q": "doge"})

        assert response.status_code == 200
        assert response.json()[0]["ticker"] == "DOGE"
        market_client.search_coins.assert_awaited_once_with("doge")


class TestHistoryEndpoint:
    """Tests for /api/coins/{coin_id}/history."""

    def test_history_payload(self, client, market_client, chart_factory) -> None:
        market_client.fetch_market_chart.return_value = chart_factory([100.0, 101.0, 102.5])

        response = client.get("/api/coins/bitcoin/history", params={"days": 30})

        assert response.status_code == 200
        body = response.json()
        assert body["current_price"] == 102.5
        assert body["prices"][0] == {"date": "2023-11-14", "price": 100.0, "volume": 1000.0}
        assert body["data_string"].splitlines() == [
            "Date,Price,ma_short,ma_long,volume,rsi",
            "2023-11-14,100,,,1000,",
            "2023-11-15,101,,,1000,",
            "2023-11-16,102.5,,,1000,",
        ]
        market_client.fetch_market_chart.assert_awaited_once_with("bitcoin", 30)

    def test_default_days(self, client, market_client, chart_factory) -> None:
        market_client.fetch_market_chart.return_value = chart_factory([1.0])

        client.get("/api/coins/bitcoin/history")

        market_client.fetch_market_chart.assert_awaited_once_with("bitcoin", 30)

    def test_upstream_failure_is_502(self, client, market_client) -> None:
        market_client.fetch_market_chart.side_effect = SourceUnavailableError("HTTP 500", 500)

        response = client.get("/api/coins/bitcoin/history")

        assert response.status_code == 502
        assert response.json() == {"error": "Could not fetch historical data."}

    def test_non_finite_upstream_sample_is_502(
        self, market_data_settings, indicator_settings
    ) -> None:
        body = (
            b'{"prices": [[1700000000000, NaN], [1700086400000, 37010.55]],'
            b' "total_volumes": [[1700000000000, 1.5e10], [1700086400000, Infinity]]}'
        )
        coingecko = CoinGeckoClient(
            market_data_settings,
            transport=httpx.MockTransport(
                lambda request: httpx.Response(
                    200, content=body, headers={"Content-Type": "application/json"}
                )
            ),
        )
        app = create_dashboard_app()
        app.state.history_service = HistoricalDataService(
            coingecko, IndicatorPipeline(indicator_settings)
        )

        response = TestClient(app).get("/api/coins/bitcoin/history", params={"days": 30})

        assert response.status_code == 502
        assert response.json() == {"error": "Could not fetch historical data."}

    def test_empty_prices_is_502(self, client, market_client, chart_factory) -> None:
        market_client.fetch_market_chart.return_value = chart_factory([])

        response = client.get("/api/coins/bitcoin/history")

        assert response.status_code == 502

    def test_days_must_be_positive(self, client) -> None:
        response = client.get("/api/coins/bitcoin/history", params={"days": 0})

        assert response.status_code == 422


class TestAnalysisEndpoint:
    """Tests for /api/coins/{coin_id}/analysis."""

    def test_analysis_payload(self, client, analysis_service) -> None:
        history = HistoricalData(
            prices=[],
            data_string="Date,Price,ma_short,ma_long,volume,rsi\n",
            current_price=0.0,
        )
        analysis_service.analyze.return_value = AnalysisResult(
            history=history, analysis={"analysis": {"summary": "flat"}}
        )

        response = client.post(
            "/api/coins/bitcoin/analysis",
            json={"name": "Bitcoin", "ticker": "BTC", "days": 7},
        )

        assert response.status_code == 200
        assert response.json()["analysis"] == {"analysis": {"summary": "flat"}}
        analysis_service.analyze.assert_awaited_once_with(
            Coin(id="bitcoin", name="Bitcoin", ticker="BTC"), 7
        )

    def test_unavailable_is_503(self, client, analysis_service) -> None:
        analysis_service.analyze.side_effect = AnalysisUnavailableError("no analyzer")

        response = client.post(
            "/api/coins/bitcoin/analysis", json={"name": "Bitcoin", "ticker": "BTC"}
        )

        assert response.status_code == 503

    def test_history_failure_is_502_with_coin_name(self, client, analysis_service) -> None:
        analysis_service.analyze.side_effect = HistoricalDataError("HTTP 404")

        response = client.post(
            "/api/coins/obscure-coin/analysis", json={"name": "Obscure", "ticker": "OBS"}
        )

        assert response.status_code == 502
        assert "Obscure" in response.json()["error"]
