"""Entry point for the CoinLens dashboard backend.

Wires all components together and serves the FastAPI app with uvicorn.

Component wiring order (in _build_components):
1. AppSettings (configuration)
2. Logging setup
3. MarketDataClient (CoinGeckoClient)
4. IndicatorPipeline (MA/RSI over aligned series)
5. HistoricalDataService (fetch + pipeline)
6. CoinCatalog (listing and search with fallback coins)
7. AnalysisService (reasoning collaborator bridge; no analyzer by default)
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI

from coinlens.analysis.service import AnalysisService, Analyzer
from coinlens.config import AppSettings
from coinlens.dashboard.app import create_dashboard_app
from coinlens.indicators.pipeline import IndicatorPipeline
from coinlens.logging import get_logger, setup_logging
from coinlens.market_data.catalog import CoinCatalog
from coinlens.market_data.coingecko_client import CoinGeckoClient
from coinlens.market_data.history import HistoricalDataService
from coinlens.models import FALLBACK_COINS


def _build_components(
    settings: AppSettings,
    analyzer: Analyzer | None = None,
) -> dict[str, Any]:
    """Build all components from settings.

    Args:
        settings: Application-wide settings.
        analyzer: Optional reasoning collaborator for /analysis requests.

    Returns:
        Dict mapping component names to instances.
    """
    client = CoinGeckoClient(settings.market_data)
    pipeline = IndicatorPipeline(settings.indicators)
    history_service = HistoricalDataService(client, pipeline)
    catalog = CoinCatalog(
        client,
        fallback=FALLBACK_COINS,
        listing_size=settings.market_data.listing_size,
    )
    analysis_service = AnalysisService(history_service, analyzer)

    return {
        "client": client,
        "pipeline": pipeline,
        "history_service": history_service,
        "catalog": catalog,
        "analysis_service": analysis_service,
    }


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Expose components on app.state; close the HTTP client on shutdown."""
    logger = get_logger("coinlens.main")
    components = app.state.components

    app.state.catalog = components["catalog"]
    app.state.history_service = components["history_service"]
    app.state.analysis_service = components["analysis_service"]

    logger.info(
        "lifespan_started",
        analysis_available=components["analysis_service"].available,
    )

    yield

    await components["client"].close()
    logger.info("coinlens_stopped")


async def run() -> None:
    """Load settings, build components and serve the dashboard API."""
    settings = AppSettings()

    setup_logging(settings.log_level)
    logger = get_logger("coinlens.main")

    components = _build_components(settings)

    app = create_dashboard_app(lifespan=lifespan)
    app.state.components = components

    logger.info(
        "starting_dashboard",
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        ma_short_window=settings.indicators.ma_short_window,
        ma_long_window=settings.indicators.ma_long_window,
        rsi_period=settings.indicators.rsi_period,
    )

    config = uvicorn.Config(
        app,
        host=settings.dashboard.host,
        port=settings.dashboard.port,
        log_level="warning",  # Suppress uvicorn access logs
    )
    server = uvicorn.Server(config)
    await server.serve()


def main() -> None:
    """Synchronous entry point."""
    asyncio.run(run())


if __name__ == "__main__":
    main()
