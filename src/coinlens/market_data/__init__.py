"""Market data access layer.

Provides the abstract client contract, the CoinGecko implementation,
payload schemas, the coin catalog, and the historical data service that
feeds the indicator pipeline.
"""

from coinlens.market_data.catalog import CoinCatalog
from coinlens.market_data.client import MarketDataClient
from coinlens.market_data.coingecko_client import CoinGeckoClient
from coinlens.market_data.history import HistoricalDataService
from coinlens.market_data.schemas import MarketChartResponse

__all__ = [
    "CoinCatalog",
    "CoinGeckoClient",
    "HistoricalDataService",
    "MarketChartResponse",
    "MarketDataClient",
]
