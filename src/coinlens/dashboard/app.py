"""FastAPI dashboard application factory."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI

from coinlens.dashboard.routes import api


def create_dashboard_app(lifespan: Any = None) -> FastAPI:
    """Create and configure the FastAPI dashboard application.

    Route handlers read their services from ``app.state``: ``catalog``,
    ``history_service`` and ``analysis_service``. They are wired by
    main.py's lifespan, or directly by tests.

    Args:
        lifespan: Optional async context manager for application lifespan events.

    Returns:
        Configured FastAPI application with the JSON API mounted at /api.
    """
    app = FastAPI(
        title="CoinLens Dashboard",
        lifespan=lifespan,
    )

    app.state.catalog = None
    app.state.history_service = None
    app.state.analysis_service = None

    app.include_router(api.router, prefix="/api")

    return app
