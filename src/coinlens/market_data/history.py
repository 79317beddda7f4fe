"""Historical data service: one fetch, validation, then the indicator pipeline.

Every failure (HTTP status, transport error, malformed payload, empty price
array) is logged with context and re-raised as a ``HistoricalDataError``.
Nothing is retried here; no partial result is ever returned.
"""

from coinlens.exceptions import EmptyDatasetError, HistoricalDataError, MarketDataError
from coinlens.indicators.models import HistoricalData
from coinlens.indicators.pipeline import IndicatorPipeline
from coinlens.logging import get_logger
from coinlens.market_data.client import MarketDataClient

logger = get_logger(__name__)


class HistoricalDataService:
    """Fetches a coin's market chart and turns it into indicator data.

    Usage:
        service = HistoricalDataService(client, IndicatorPipeline(settings.indicators))
        history = await service.get_historical_data("bitcoin", days=30)
    """

    def __init__(self, client: MarketDataClient, pipeline: IndicatorPipeline) -> None:
        self._client = client
        self._pipeline = pipeline

    async def get_historical_data(self, coin_id: str, days: int) -> HistoricalData:
        """Fetch and process history for ``coin_id`` over the last ``days`` days.

        Raises:
            HistoricalDataError: On any failure; ``EmptyDatasetError`` when
                the API returned no prices.
        """
        try:
            chart = await self._client.fetch_market_chart(coin_id, days)
        except MarketDataError as e:
            logger.error(
                "historical_data_fetch_failed",
                coin_id=coin_id,
                days=days,
                status_code=e.status_code,
                error=str(e),
            )
            raise HistoricalDataError(str(e)) from e

        if not chart.prices:
            logger.error("historical_data_empty", coin_id=coin_id, days=days)
            raise EmptyDatasetError(f"no price data returned for {coin_id}")

        history = self._pipeline.run(
            chart.price_samples(),
            chart.volume_samples(),
            days,
        )

        if len(history.prices) < len(chart.prices):
            logger.debug(
                "partial_alignment",
                coin_id=coin_id,
                prices=len(chart.prices),
                aligned=len(history.prices),
            )

        logger.info(
            "historical_data_ready",
            coin_id=coin_id,
            days=days,
            records=len(history.prices),
            current_price=history.current_price,
        )
        return history
