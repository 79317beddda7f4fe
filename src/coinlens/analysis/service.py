"""Analysis service: hands the indicator table to the reasoning collaborator.

The collaborator (an LLM prompt flow) lives outside this package. It is
injected as an ``Analyzer``; whatever JSON it returns is passed back to the
caller without interpretation.
"""

from typing import Any, Protocol

from coinlens.analysis.models import AnalysisRequest, AnalysisResult
from coinlens.exceptions import AnalysisUnavailableError
from coinlens.indicators.models import HistoricalData
from coinlens.logging import get_logger
from coinlens.market_data.history import HistoricalDataService
from coinlens.models import Coin

logger = get_logger(__name__)


class Analyzer(Protocol):
    """Async callable producing the structured analysis for one request."""

    async def __call__(self, request: AnalysisRequest) -> dict[str, Any]: ...


def build_request(coin: Coin, days: int, history: HistoricalData) -> AnalysisRequest:
    """Assemble the collaborator input from a finished history."""
    return AnalysisRequest(
        historical_data=history.data_string,
        coin_name=coin.name,
        coin_ticker=coin.ticker,
        timeframe_days=days,
        current_price=history.current_price,
    )


class AnalysisService:
    """Runs history -> request -> analyzer for one coin and timeframe.

    ``analyzer`` may be None when no reasoning backend is deployed; history
    is still served by ``HistoricalDataService`` in that case, only
    ``analyze`` refuses.
    """

    def __init__(
        self,
        history_service: HistoricalDataService,
        analyzer: Analyzer | None = None,
    ) -> None:
        self._history_service = history_service
        self._analyzer = analyzer

    @property
    def available(self) -> bool:
        return self._analyzer is not None

    async def analyze(self, coin: Coin, days: int) -> AnalysisResult:
        """Fetch history for ``coin`` and ask the analyzer about it.

        Raises:
            AnalysisUnavailableError: If no analyzer is configured.
            HistoricalDataError: If the history cannot be fetched; the
                analyzer is not called.
        """
        if self._analyzer is None:
            raise AnalysisUnavailableError("no analyzer configured")

        history = await self._history_service.get_historical_data(coin.id, days)
        request = build_request(coin, days, history)

        logger.info(
            "analysis_requested",
            coin_id=coin.id,
            days=days,
            records=len(history.prices),
        )
        analysis = await self._analyzer(request)
        return AnalysisResult(history=history, analysis=analysis)
