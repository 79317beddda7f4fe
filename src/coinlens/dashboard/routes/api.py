"""JSON API endpoints for the dashboard: coins, search, history, and analysis."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from coinlens.exceptions import AnalysisUnavailableError, HistoricalDataError
from coinlens.logging import bind_request_context
from coinlens.models import DEFAULT_TIMEFRAME_DAYS, TIMEFRAMES, Coin

log = structlog.get_logger(__name__)

router = APIRouter()

ANALYSIS_FAILED_MESSAGE = "Could not perform analysis for {name}. This coin may not be supported."


class AnalysisBody(BaseModel):
    """Coin context the client already holds from the listing."""

    name: str
    ticker: str
    days: int = Field(default=DEFAULT_TIMEFRAME_DAYS, ge=1)


@router.get("/timeframes")
async def get_timeframes() -> JSONResponse:
    """Lookback presets for the timeframe selector."""
    return JSONResponse(content=[{"label": t.label, "days": t.days} for t in TIMEFRAMES])


@router.get("/coins")
async def get_coins(request: Request) -> JSONResponse:
    """Top coins by market cap (fallback list when the provider is down)."""
    catalog = request.app.state.catalog
    coins = await catalog.list_coins()
    return JSONResponse(content=[c.to_dict() for c in coins])


@router.get("/coins/search")
async def search_coins(request: Request, q: str = "") -> JSONResponse:
    """Search coins by name, ticker or id."""
    catalog = request.app.state.catalog
    coins = await catalog.search_coins(q)
    return JSONResponse(content=[c.to_dict() for c in coins])


@router.get("/coins/{coin_id}/history")
async def get_history(
    request: Request,
    coin_id: str,
    days: int = Query(default=DEFAULT_TIMEFRAME_DAYS, ge=1),
) -> JSONResponse:
    """Chart rows, prompt table and current price for one coin."""
    bind_request_context(coin_id=coin_id, days=days)
    history_service = request.app.state.history_service

    try:
        history = await history_service.get_historical_data(coin_id, days)
    except HistoricalDataError as e:
        log.warning("history_request_failed", detail=e.detail)
        return JSONResponse(status_code=502, content={"error": str(e)})

    return JSONResponse(content=history.to_dict())


@router.post("/coins/{coin_id}/analysis")
async def run_analysis(request: Request, coin_id: str, body: AnalysisBody) -> JSONResponse:
    """History plus the reasoning collaborator's structured analysis."""
    bind_request_context(coin_id=coin_id, days=body.days)
    analysis_service = request.app.state.analysis_service
    coin = Coin(id=coin_id, name=body.name, ticker=body.ticker)

    try:
        result = await analysis_service.analyze(coin, body.days)
    except AnalysisUnavailableError:
        return JSONResponse(status_code=503, content={"error": "Analysis is not available."})
    except HistoricalDataError as e:
        log.warning("analysis_request_failed", detail=e.detail)
        return JSONResponse(
            status_code=502,
            content={"error": ANALYSIS_FAILED_MESSAGE.format(name=coin.name)},
        )

    return JSONResponse(content=result.to_dict())
