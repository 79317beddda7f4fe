"""Abstract market data client interface.

Defines the contract for all market data providers. The historical data
service and coin catalog depend only on this interface, keeping
CoinGecko-specific details isolated in the concrete implementation.
"""

from abc import ABC, abstractmethod

from coinlens.market_data.schemas import MarketChartResponse
from coinlens.models import Coin


class MarketDataClient(ABC):
    """Abstract base class for market data API clients.

    Implementations raise ``SourceUnavailableError`` for transport and HTTP
    status failures and ``MalformedResponseError`` for payloads that fail
    validation. They never retry.
    """

    @abstractmethod
    async def fetch_market_chart(self, coin_id: str, days: int) -> MarketChartResponse:
        """Fetch price and volume history for a coin over the last ``days`` days."""
        ...

    @abstractmethod
    async def search_coins(self, query: str) -> list[Coin]:
        """Search coins by name, symbol or id."""
        ...

    @abstractmethod
    async def fetch_top_coins(self, limit: int) -> list[Coin]:
        """List the top ``limit`` coins by market capitalisation."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        ...
