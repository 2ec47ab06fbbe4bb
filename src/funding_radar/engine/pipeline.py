"""Analysis pipeline — one aggregation cycle from snapshots to MarketAnalysis."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from decimal import Decimal

from funding_radar.engine.bias import (
    actionable_summary,
    funding_imbalance,
    general_bias,
    long_trap_candidates,
    market_outlook,
    short_squeeze_candidates,
    volume_sentiment,
)
from funding_radar.engine.classification import classify
from funding_radar.engine.dominance import TOP_N, summarize_dominance
from funding_radar.engine.narrative import select_narrative
from funding_radar.engine.setups import STRONG_VOLUME, VOLUME_THRESHOLD, detect_setups
from funding_radar.engine.signals import generate_signals
from funding_radar.models import MarketAnalysis, SymbolSnapshot


def analyze(
    snapshots: Sequence[SymbolSnapshot],
    *,
    top_n: int = TOP_N,
    setup_volume_threshold: Decimal = VOLUME_THRESHOLD,
    setup_strong_volume: Decimal = STRONG_VOLUME,
    ts: datetime | None = None,
) -> MarketAnalysis:
    """Run classification, dominance, signals, narrative and ratings over one snapshot set.

    Side-effect free; an empty *snapshots* yields zero counts, a neutral
    narrative and a neutral outlook.
    """
    counts = classify(snapshots)
    dominance = summarize_dominance(snapshots, top_n)
    setups = detect_setups(snapshots, setup_volume_threshold, setup_strong_volume)

    breadth = general_bias(counts)
    imbalance = funding_imbalance(snapshots)
    squeeze = short_squeeze_candidates(dominance.top_short_squeeze)
    trap = long_trap_candidates(dominance.top_long_trap)
    volume = volume_sentiment(snapshots)
    actionable = actionable_summary(setups)
    outlook = market_outlook(
        [breadth.score, imbalance.score, squeeze.score, trap.score, volume.score, actionable.score]
    )

    return MarketAnalysis(
        ts=ts or datetime.now(timezone.utc),
        total_symbols=len(snapshots),
        counts=counts,
        dominance=dominance,
        trade_signals=generate_signals(snapshots),
        narrative=select_narrative(counts),
        general_bias=breadth,
        funding_imbalance=imbalance,
        short_squeeze_candidates=squeeze,
        long_trap_candidates=trap,
        volume_sentiment=volume,
        actionable_summary=actionable,
        outlook=outlook,
        setups=setups,
    )
