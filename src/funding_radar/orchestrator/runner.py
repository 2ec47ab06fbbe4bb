"""Orchestrator runner — polls Binance on a tick and publishes one analysis per cycle."""

from __future__ import annotations

import argparse
import asyncio
from decimal import Decimal

import structlog

from funding_radar.config.loader import load_config
from funding_radar.config.schema import AppConfig
from funding_radar.engine.join import build_snapshots
from funding_radar.engine.pipeline import analyze
from funding_radar.exchange.binance import BinanceFuturesClient
from funding_radar.logging.setup import setup_logging
from funding_radar.models import MarketAnalysis
from funding_radar.orchestrator.scheduler import TickScheduler
from funding_radar.orchestrator.state import MarketState

log = structlog.get_logger("orchestrator")

CYCLE_NAME = "market"


async def run_cycle(
    client: BinanceFuturesClient,
    state: MarketState,
    config: AppConfig,
) -> MarketAnalysis | None:
    """Fetch, join, analyze and publish once.

    Any failure is logged and leaves the previously published analysis in
    place; nothing is raised to the scheduler.
    """
    try:
        instruments, tickers, funding = await client.fetch_market()
        snapshots = build_snapshots(
            instruments,
            tickers,
            funding,
            quote_asset=config.binance.quote_asset,
            contract_type=config.binance.contract_type,
        )
        analysis = analyze(
            snapshots,
            top_n=config.analysis.top_n,
            setup_volume_threshold=Decimal(str(config.analysis.setup_volume_threshold)),
            setup_strong_volume=Decimal(str(config.analysis.setup_strong_volume)),
        )
    except Exception:
        state.record_failure()
        log.exception("cycle_failed", failures=state.cycles_failed)
        return None

    state.publish(analysis)
    counts = analysis.counts
    log.info(
        "cycle_published",
        symbols=analysis.total_symbols,
        green=counts.green,
        red=counts.red,
        liquidity=analysis.dominance.liquidity.dominant,
        amplitude=analysis.dominance.amplitude.dominant,
        narrative=analysis.narrative.key,
        outlook=analysis.outlook.tone,
    )
    return analysis


async def run_loop(config: AppConfig, state: MarketState | None = None) -> None:
    """Main polling loop — one non-overlapping cycle per poll interval."""
    state = state or MarketState()
    client = BinanceFuturesClient(base_url=config.binance.base_url)
    scheduler = TickScheduler(interval_s=config.binance.poll_interval_s)

    log.info(
        "orchestrator_started",
        base_url=config.binance.base_url,
        interval_s=config.binance.poll_interval_s,
        quote_asset=config.binance.quote_asset,
    )
    try:
        await scheduler.run_forever(CYCLE_NAME, lambda: run_cycle(client, state, config))
    finally:
        await client.close()


def main(config_path: str | None = None) -> None:
    """Entry point — load config, set up logging, run the async loop."""
    config = load_config(config_path)
    setup_logging(level=config.logging.level, log_format=config.logging.format)
    asyncio.run(run_loop(config))


def cli() -> None:
    parser = argparse.ArgumentParser(description="Funding radar market poller")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    args = parser.parse_args()
    main(config_path=args.config)
