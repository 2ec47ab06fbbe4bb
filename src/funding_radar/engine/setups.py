"""Per-symbol sentiment setups — volume-gated squeeze / trap detection."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from funding_radar.models import SymbolSetup, SymbolSnapshot

VOLUME_THRESHOLD = Decimal(50_000_000)
STRONG_VOLUME = Decimal(100_000_000)
STRONG_FUNDING = Decimal("0.015")
LOW_FUNDING = Decimal("0.0001")


def format_volume(volume: Decimal) -> str:
    """Compact dollar volume: $1.2B, $3.4M, $12,345."""
    if volume >= 1_000_000_000:
        return f"${volume / Decimal(1e9):.1f}B"
    if volume >= 1_000_000:
        return f"${volume / Decimal(1e6):.1f}M"
    return f"${volume:,.0f}"


def _risk_reward(abs_change: Decimal, strong_volume: bool) -> str:
    if abs_change > Decimal("4.5") and strong_volume:
        return "Strong"
    if abs_change > Decimal("3.5"):
        return "High"
    if abs_change > 2:
        return "Medium-High"
    return "Medium"


def detect_setup(
    s: SymbolSnapshot,
    volume_threshold: Decimal = VOLUME_THRESHOLD,
    strong_volume: Decimal = STRONG_VOLUME,
) -> SymbolSetup:
    """First matching setup wins: squeeze, long trap, bullish, bearish, neutral."""
    pc = s.price_change_percent
    rate = s.funding_rate
    abs_pc = abs(pc)
    liquid = s.volume >= volume_threshold
    is_strong_volume = s.volume >= strong_volume
    rising = 0 < pc < 10
    falling = -10 < pc < 0

    volume_usd = format_volume(s.volume)
    funding_pct = f"{rate * 100:.4f}%"
    risk = _risk_reward(abs_pc, is_strong_volume)

    if rising and liquid and rate < 0:
        return SymbolSetup(
            symbol=s.symbol,
            setup="Early Squeeze Signal",
            reason=(
                f"Moderate price gain (+{pc:.1f}%), strong volume ({volume_usd}), and negative "
                f"funding ({funding_pct}) suggest a developing short squeeze."
            ),
            price_change_percent=pc,
            strong=abs_pc > 4 and (rate < -STRONG_FUNDING or is_strong_volume),
            risk_reward=risk,
        )
    if falling and liquid and rate > 0:
        return SymbolSetup(
            symbol=s.symbol,
            setup="Early Long Trap",
            reason=(
                f"Moderate price drop ({pc:.1f}%), high volume ({volume_usd}), and positive "
                f"funding ({funding_pct}) suggest a developing long trap scenario."
            ),
            price_change_percent=pc,
            strong=abs_pc > 3 and (rate > STRONG_FUNDING or is_strong_volume),
            risk_reward=risk,
        )
    if rising and liquid and rate <= LOW_FUNDING:
        return SymbolSetup(
            symbol=s.symbol,
            setup="Bullish Opportunity",
            reason=(
                f"Moderate price gain (+{pc:.1f}%), high volume ({volume_usd}), and low or "
                f"negative funding ({funding_pct}) suggest early bullish momentum."
            ),
            price_change_percent=pc,
            strong=abs_pc > 3 and (rate < 0 or is_strong_volume),
            risk_reward=risk,
        )
    if falling and liquid and rate >= LOW_FUNDING:
        return SymbolSetup(
            symbol=s.symbol,
            setup="Bearish Risk",
            reason=(
                f"Moderate price drop ({pc:.1f}%), high volume ({volume_usd}), and positive "
                f"funding ({funding_pct}) suggest long trap or hidden sell pressure."
            ),
            price_change_percent=pc,
            strong=abs_pc > 3 and (rate > Decimal("0.01") or is_strong_volume),
            risk_reward=risk,
        )
    return SymbolSetup(
        symbol=s.symbol,
        setup="Neutral",
        reason="No strong sentiment signal detected.",
        price_change_percent=pc,
        risk_reward="Low",
    )


def detect_setups(
    snapshots: Iterable[SymbolSnapshot],
    volume_threshold: Decimal = VOLUME_THRESHOLD,
    strong_volume: Decimal = STRONG_VOLUME,
) -> list[SymbolSetup]:
    return [detect_setup(s, volume_threshold, strong_volume) for s in snapshots]
