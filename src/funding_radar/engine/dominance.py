"""Dominance & imbalance aggregation — pure functions over one cycle's snapshots."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from decimal import Decimal

from funding_radar.models import (
    AmplitudeDominance,
    DominanceSummary,
    SymbolSnapshot,
    VolumeDominance,
)
from funding_radar.models.analysis import DominantSide

TOP_N = 5
ZERO = Decimal(0)

VolumeExtractor = Callable[[SymbolSnapshot], Decimal]


def _side(bullish: Decimal, bearish: Decimal) -> DominantSide:
    if bullish > bearish:
        return "bullish"
    if bearish > bullish:
        return "bearish"
    return "balanced"


def _pct(part: Decimal, total: Decimal) -> float:
    if total <= 0:
        return 0.0
    return float(part / total * 100)


def volume_dominance(
    snapshots: Sequence[SymbolSnapshot],
    extract: VolumeExtractor,
) -> VolumeDominance:
    """Sum ``extract(s)`` over green vs red snapshots and label the larger side."""
    green = sum((extract(s) for s in snapshots if s.is_green), ZERO)
    red = sum((extract(s) for s in snapshots if not s.is_green), ZERO)
    total = green + red
    return VolumeDominance(
        green_total=green,
        red_total=red,
        dominant=_side(green, red),
        green_pct=_pct(green, total),
        red_pct=_pct(red, total),
    )


def _quote_volume(s: SymbolSnapshot) -> Decimal:
    return s.volume


def liquidity_dominance(snapshots: Sequence[SymbolSnapshot]) -> VolumeDominance:
    return volume_dominance(snapshots, _quote_volume)


def transaction_dominance(snapshots: Sequence[SymbolSnapshot]) -> VolumeDominance:
    # 24h ticker only carries quote volume; swap in executed-trade volume when available.
    return volume_dominance(snapshots, _quote_volume)


def amplitude_percent(s: SymbolSnapshot) -> Decimal:
    """High-low range as a percentage of the open price, never negative."""
    if s.open_price <= 0:
        return ZERO
    return max(s.high_price - s.low_price, ZERO) / s.open_price * 100


def amplitude_dominance(snapshots: Sequence[SymbolSnapshot]) -> AmplitudeDominance:
    """Volume-weighted amplitude, bucketed by candle direction.

    Flat candles (close == open) count toward neither side but stay in the
    denominator, so the two percentages sum to less than 100 when a flat
    candle with a non-zero range is present.
    """
    bullish = ZERO
    bearish = ZERO
    combined = ZERO
    for s in snapshots:
        weighted = amplitude_percent(s) * s.volume
        combined += weighted
        if s.close_price > s.open_price:
            bullish += weighted
        elif s.close_price < s.open_price:
            bearish += weighted

    return AmplitudeDominance(
        bullish_weighted=bullish,
        bearish_weighted=bearish,
        dominant=_side(bullish, bearish),
        bullish_pct=_pct(bullish, combined),
        bearish_pct=_pct(bearish, combined),
    )


def top_short_squeeze(snapshots: Sequence[SymbolSnapshot], n: int = TOP_N) -> list[SymbolSnapshot]:
    """Rising price with negative funding, most negative funding first."""
    candidates = [s for s in snapshots if s.price_change_percent > 0 and s.funding_rate < 0]
    # sorted() is stable, so ties keep input order
    return sorted(candidates, key=lambda s: s.funding_rate)[:n]


def top_long_trap(snapshots: Sequence[SymbolSnapshot], n: int = TOP_N) -> list[SymbolSnapshot]:
    """Falling price with positive funding, most positive funding first."""
    candidates = [s for s in snapshots if s.price_change_percent < 0 and s.funding_rate > 0]
    return sorted(candidates, key=lambda s: s.funding_rate, reverse=True)[:n]


def summarize_dominance(snapshots: Sequence[SymbolSnapshot], top_n: int = TOP_N) -> DominanceSummary:
    return DominanceSummary(
        liquidity=liquidity_dominance(snapshots),
        transaction=transaction_dominance(snapshots),
        amplitude=amplitude_dominance(snapshots),
        top_short_squeeze=top_short_squeeze(snapshots, top_n),
        top_long_trap=top_long_trap(snapshots, top_n),
    )
