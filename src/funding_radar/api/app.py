"""FastAPI application — latest market analysis and the cached news proxy."""

from __future__ import annotations

import asyncio
import contextlib
from datetime import datetime, timezone
from typing import Optional

import structlog
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from funding_radar.config.loader import load_config
from funding_radar.config.schema import AppConfig
from funding_radar.errors import FundingRadarError
from funding_radar.exchange.binance import BinanceFuturesClient
from funding_radar.news import NewsProxy, TTLCache, headline_tone
from funding_radar.orchestrator.runner import CYCLE_NAME, run_cycle
from funding_radar.orchestrator.scheduler import TickScheduler
from funding_radar.orchestrator.state import MarketState

logger = structlog.get_logger()


def _error_detail(exc: FundingRadarError) -> dict:
    detail: dict = {"message": exc.message}
    if exc.code:
        detail["code"] = exc.code
    details = getattr(exc, "details", None)
    if details is not None:
        detail["details"] = details
    return detail


def create_app(
    config: AppConfig | None = None,
    *,
    state: MarketState | None = None,
    news_proxy: NewsProxy | None = None,
    market_client: BinanceFuturesClient | None = None,
    start_poller: bool = True,
) -> FastAPI:
    """Build the API.

    The market poller runs as a background task started on app startup; pass
    ``start_poller=False`` to serve a pre-filled *state* only. On shutdown the
    poller is cancelled and awaited before *market_client* is closed.
    """
    config = config or load_config()
    state = state or MarketState()
    if news_proxy is None:
        news_proxy = NewsProxy(
            config.news.api_key,
            TTLCache(ttl_seconds=config.news.ttl_s),
            base_url=config.news.base_url,
            language=config.news.language,
            default_sort=config.news.default_sort,
            default_page_size=config.news.default_page_size,
        )

    app = FastAPI(
        title="Funding Radar API",
        description="Perpetual futures funding/price divergence analysis and news proxy",
        version="0.1.0",
    )

    # CORS middleware - adjust origins in production
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.market = state
    app.state.news_proxy = news_proxy
    background: dict[str, object] = {}

    @app.on_event("startup")
    async def startup_event():
        """Start the market poller."""
        if not start_poller:
            return
        client = market_client or BinanceFuturesClient(base_url=config.binance.base_url)
        scheduler = TickScheduler(interval_s=config.binance.poll_interval_s)
        background["client"] = client
        background["task"] = asyncio.create_task(
            scheduler.run_forever(CYCLE_NAME, lambda: run_cycle(client, state, config))
        )
        logger.info("Market poller started", interval_s=config.binance.poll_interval_s)

    @app.on_event("shutdown")
    async def shutdown_event():
        """Stop the poller before closing the clients it uses."""
        task = background.get("task")
        if isinstance(task, asyncio.Task):
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        client = background.get("client")
        if isinstance(client, BinanceFuturesClient):
            await client.close()
        await news_proxy.close()

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "lastUpdated": state.updated_at.isoformat() if state.updated_at else None,
            "cyclesPublished": state.cycles_published,
            "cyclesFailed": state.cycles_failed,
        }

    @app.get("/api/market")
    async def get_market():
        """Latest published analysis: counts, dominance, signals, narrative."""
        analysis = state.latest
        if analysis is None:
            raise HTTPException(status_code=503, detail="Market data not yet available")
        return analysis.model_dump(mode="json")

    @app.get("/api/market/signals")
    async def get_trade_signals(direction: Optional[str] = None):
        """Trade signals from the latest cycle, optionally filtered by direction."""
        analysis = state.latest
        if analysis is None:
            raise HTTPException(status_code=503, detail="Market data not yet available")
        signals = analysis.trade_signals
        if direction:
            wanted = direction.upper()
            if wanted not in ("LONG", "SHORT", "NONE"):
                raise HTTPException(status_code=400, detail=f"Unknown direction {direction!r}")
            signals = [s for s in signals if s.direction == wanted]
        return {"signals": [s.model_dump(mode="json") for s in signals]}

    @app.get("/api/news")
    async def get_news(
        query: Optional[str] = None,
        sort: Optional[str] = None,
        pageSize: Optional[str] = None,
    ):
        """Proxy a NewsAPI search through the TTL cache."""
        try:
            articles = await news_proxy.search(query, sort=sort, page_size=pageSize)
        except FundingRadarError as exc:
            logger.warning(
                "news_request_failed",
                query=query,
                status=exc.http_status,
                error=exc.message,
            )
            raise HTTPException(status_code=exc.http_status, detail=_error_detail(exc)) from exc

        body: dict = {
            "articles": [a.model_dump(by_alias=True) for a in articles],
            "tone": headline_tone(articles),
        }
        if not articles:
            body["message"] = "No articles found."
        return body

    return app


app = create_app()
