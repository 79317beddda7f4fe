"""Shared test fixtures for the CoinLens backend."""

import pytest

from coinlens.config import AppSettings, IndicatorSettings, MarketDataSettings
from coinlens.market_data.schemas import MarketChartResponse

#: 2023-11-14T22:13:20Z
BASE_TS_MS = 1_700_000_000_000
DAY_MS = 86_400_000


def make_chart(
    prices: list[float],
    volumes: list[float] | None = None,
    start_ms: int = BASE_TS_MS,
    interval_ms: int = DAY_MS,
) -> MarketChartResponse:
    """Build a market_chart payload with evenly spaced, shared timestamps.

    ``volumes`` defaults to 1000.0 per sample so every price aligns.
    """
    if volumes is None:
        volumes = [1000.0] * len(prices)
    return MarketChartResponse(
        prices=[(start_ms + i * interval_ms, p) for i, p in enumerate(prices)],
        total_volumes=[(start_ms + i * interval_ms, v) for i, v in enumerate(volumes)],
    )


@pytest.fixture
def indicator_settings() -> IndicatorSettings:
    """Default indicator windows (50/200/14) with volume and RSI enabled."""
    return IndicatorSettings(
        ma_short_window=50,
        ma_long_window=200,
        rsi_period=14,
        volume_enabled=True,
        rsi_enabled=True,
    )


@pytest.fixture
def market_data_settings() -> MarketDataSettings:
    """CoinGecko settings with a dummy demo key."""
    return MarketDataSettings(
        base_url="https://api.coingecko.com/api/v3",
        vs_currency="usd",
        api_key="test-demo-key",  # type: ignore[arg-type]
        timeout_seconds=5.0,
        listing_size=20,
        search_limit=3,
    )


@pytest.fixture
def mock_settings(indicator_settings, market_data_settings) -> AppSettings:
    """Return AppSettings with test defaults."""
    return AppSettings(
        log_level="DEBUG",
        market_data=market_data_settings,
        indicators=indicator_settings,
    )


@pytest.fixture
def chart_factory():
    """Expose ``make_chart`` to tests."""
    return make_chart
