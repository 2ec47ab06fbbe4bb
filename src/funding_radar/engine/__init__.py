"""Market signal aggregation engine — join, classify, aggregate, signal, narrate."""

from funding_radar.engine.classification import classify
from funding_radar.engine.dominance import (
    amplitude_dominance,
    liquidity_dominance,
    summarize_dominance,
    top_long_trap,
    top_short_squeeze,
    transaction_dominance,
    volume_dominance,
)
from funding_radar.engine.join import build_snapshots, join_snapshots, parse_number
from funding_radar.engine.narrative import NARRATIVE_RULES, select_narrative
from funding_radar.engine.pipeline import analyze
from funding_radar.engine.signals import generate_signal, generate_signals

__all__ = [
    "NARRATIVE_RULES",
    "amplitude_dominance",
    "analyze",
    "build_snapshots",
    "classify",
    "generate_signal",
    "generate_signals",
    "join_snapshots",
    "liquidity_dominance",
    "parse_number",
    "select_narrative",
    "summarize_dominance",
    "top_long_trap",
    "top_short_squeeze",
    "transaction_dominance",
    "volume_dominance",
]
