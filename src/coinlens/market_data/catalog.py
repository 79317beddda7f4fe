"""Coin listing and search with a fallback list for upstream outages."""

from collections.abc import Sequence

from coinlens.exceptions import MarketDataError
from coinlens.logging import get_logger
from coinlens.market_data.client import MarketDataClient
from coinlens.models import Coin

logger = get_logger(__name__)

#: Queries shorter than this return the listing instead of hitting /search.
MIN_SEARCH_LENGTH = 2


class CoinCatalog:
    """Serves the coin selector.

    Graceful degradation: when the listing or search endpoint fails, the
    injected ``fallback`` coins are served instead of an error.
    """

    def __init__(
        self,
        client: MarketDataClient,
        fallback: Sequence[Coin],
        listing_size: int = 20,
    ) -> None:
        self._client = client
        self._fallback = list(fallback)
        self._listing_size = listing_size

    async def list_coins(self) -> list[Coin]:
        """Top coins by market cap, or the fallback list."""
        try:
            coins = await self._client.fetch_top_coins(self._listing_size)
        except MarketDataError as e:
            logger.warning("coin_listing_unavailable", error=str(e), fallback=len(self._fallback))
            return list(self._fallback)

        if not coins:
            return list(self._fallback)
        return coins

    async def search_coins(self, query: str) -> list[Coin]:
        """Search by name, ticker or id.

        Blank and one-character queries return the listing.
        """
        query = query.strip()
        if len(query) < MIN_SEARCH_LENGTH:
            return await self.list_coins()

        try:
            return await self._client.search_coins(query)
        except MarketDataError as e:
            logger.warning("coin_search_unavailable", query=query, error=str(e))
            return self._filter_fallback(query)

    def _filter_fallback(self, query: str) -> list[Coin]:
        needle = query.lower()
        return [
            coin
            for coin in self._fallback
            if needle in coin.id.lower()
            or needle in coin.name.lower()
            or needle in coin.ticker.lower()
        ]
