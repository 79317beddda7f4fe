"""CoinGecko implementation of MarketDataClient over httpx.

Endpoints used (public API v3):
- ``/coins/{id}/market_chart``: ``prices`` and ``total_volumes`` series.
  CoinGecko picks the granularity from ``days`` (5-minute for 1 day,
  hourly up to 90 days, daily beyond).
- ``/search``: free-text coin search.
- ``/coins/markets``: coins ordered by market cap.

A demo API key, when configured, is sent as the ``x-cg-demo-api-key`` header.
"""

from typing import Any

import httpx
from pydantic import ValidationError

from coinlens.config import MarketDataSettings
from coinlens.exceptions import MalformedResponseError, SourceUnavailableError
from coinlens.logging import get_logger
from coinlens.market_data.client import MarketDataClient
from coinlens.market_data.schemas import MarketChartResponse, MarketListing, SearchResponse
from coinlens.models import Coin

logger = get_logger(__name__)


class CoinGeckoClient(MarketDataClient):
    """Async CoinGecko client.

    Usage:
        client = CoinGeckoClient(settings.market_data)
        chart = await client.fetch_market_chart("bitcoin", days=30)
        await client.close()

    ``transport`` lets tests substitute an ``httpx.MockTransport``.
    """

    def __init__(
        self,
        settings: MarketDataSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        headers = {"Accept": "application/json"}
        api_key = settings.api_key.get_secret_value()
        if api_key:
            headers["x-cg-demo-api-key"] = api_key
        self._client = httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            headers=headers,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    # ──────────────────────────────────────────────
    # Public methods
    # ──────────────────────────────────────────────

    async def fetch_market_chart(self, coin_id: str, days: int) -> MarketChartResponse:
        payload = await self._get(
            f"/coins/{coin_id}/market_chart",
            params={"vs_currency": self._settings.vs_currency, "days": days},
        )
        try:
            chart = MarketChartResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(
                f"market_chart payload for {coin_id} failed validation: {e.error_count()} errors"
            ) from e

        logger.debug(
            "market_chart_fetched",
            coin_id=coin_id,
            days=days,
            prices=len(chart.prices),
            volumes=len(chart.total_volumes),
        )
        return chart

    async def search_coins(self, query: str) -> list[Coin]:
        payload = await self._get("/search", params={"query": query})
        try:
            result = SearchResponse.model_validate(payload)
        except ValidationError as e:
            raise MalformedResponseError("search payload failed validation") from e
        return [entry.to_coin() for entry in result.coins[: self._settings.search_limit]]

    async def fetch_top_coins(self, limit: int) -> list[Coin]:
        payload = await self._get(
            "/coins/markets",
            params={
                "vs_currency": self._settings.vs_currency,
                "order": "market_cap_desc",
                "per_page": limit,
                "page": 1,
            },
        )
        try:
            entries = MarketListing.validate_python(payload)
        except ValidationError as e:
            raise MalformedResponseError("coins/markets payload failed validation") from e
        return [entry.to_coin() for entry in entries]

    # ──────────────────────────────────────────────
    # Internal
    # ──────────────────────────────────────────────

    async def _get(self, path: str, params: dict[str, Any]) -> Any:
        """GET ``path`` and decode the JSON body.

        Raises:
            SourceUnavailableError: Transport error or non-2xx status.
            MalformedResponseError: Body is not JSON.
        """
        try:
            response = await self._client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise SourceUnavailableError(
                f"GET {path} returned HTTP {status}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            raise SourceUnavailableError(f"GET {path} failed: {e!r}") from e

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"GET {path} returned non-JSON body") from e
