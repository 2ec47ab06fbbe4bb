"""Market-wide bias ratings on a 0-10 scale and the outlook averaged from them.

Each component rates one aspect of a cycle (breadth, funding imbalance,
divergence candidates, heavy-volume direction, actionable setups).
``market_outlook`` averages whichever component scores it is given.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal

from funding_radar.models import (
    ActionableSummary,
    BiasRating,
    ClassificationCounts,
    MarketOutlook,
    SymbolSetup,
    SymbolSnapshot,
)

# Funding imbalance thresholds (counts of symbols, tuned for the ~300 USDT perps)
PUN_MAX = 30
PDP_HIGH_THRESHOLD = 230
PDP_LOW_THRESHOLD = 150

# Quote volume a divergence candidate needs to count toward its rating
CANDIDATE_VOLUME = Decimal(50_000_000)
# Quote volume a symbol needs to count toward volume sentiment
HEAVY_VOLUME = Decimal(100_000_000)


def general_bias(counts: ClassificationCounts) -> BiasRating:
    """Rate market breadth from the green/red split."""
    green, red = counts.green, counts.red
    if green > red * 1.5:
        return BiasRating(
            rating="Strongly Bullish",
            interpretation="Significantly more pairs are showing positive 24h price change.",
            score=8.5,
        )
    if red > green * 1.5:
        return BiasRating(
            rating="Strongly Bearish",
            interpretation="Significantly more pairs are showing negative 24h price change.",
            score=2.5,
        )
    if green > red:
        return BiasRating(
            rating="Slightly Bullish",
            interpretation="More pairs are showing positive 24h price change.",
            score=6.5,
        )
    if red > green:
        return BiasRating(
            rating="Slightly Bearish",
            interpretation="More pairs are showing negative 24h price change.",
            score=4.5,
        )
    return BiasRating(
        rating="Neutral",
        interpretation="Even split between positive and negative price changes.",
        score=5,
    )


def funding_imbalance(snapshots: Sequence[SymbolSnapshot]) -> BiasRating:
    """Compare price-up/funding-negative (PUN) against price-down/funding-positive (PDP).

    Strict inequalities: flat prices and zero funding count toward neither.
    """
    pun = sum(1 for s in snapshots if s.price_change_percent > 0 and s.funding_rate < 0)
    pdp = sum(1 for s in snapshots if s.price_change_percent < 0 and s.funding_rate > 0)

    if pun < PUN_MAX and pdp > PDP_HIGH_THRESHOLD:
        return BiasRating(
            rating="Bearish Trap Skew",
            interpretation=(
                f"Bearish trap: {pdp} longs are paying while price drops, and only {pun} "
                "shorts are present. Longs are trapped, further selloff possible."
            ),
            score=2.0,
        )
    if pun < PUN_MAX and pdp < PDP_LOW_THRESHOLD:
        return BiasRating(
            rating="Bullish Weak Trap Recovery",
            interpretation=(
                f"Bullish recovery possible: {pdp} longs are paying but not extreme, and only "
                f"{pun} shorts are defending upside. Market may lean bullish."
            ),
            score=8.0,
        )
    return BiasRating(
        rating="Mixed/Neutral Funding",
        interpretation=f"No strong trap pattern. PUN: {pun}, PDP: {pdp}.",
        score=5.0,
    )


def _liquid(candidates: Iterable[SymbolSnapshot], min_volume: Decimal) -> int:
    return sum(1 for s in candidates if s.volume > min_volume)


def short_squeeze_candidates(
    top_short_squeeze: Sequence[SymbolSnapshot],
    min_volume: Decimal = CANDIDATE_VOLUME,
) -> BiasRating:
    """Rate the top short-squeeze list by how many entries carry real volume."""
    count = _liquid(top_short_squeeze, min_volume)
    if count > 3:
        return BiasRating(
            rating="High Potential",
            interpretation=(
                f"Many pairs ({count}) show price appreciation with negative funding, "
                "indicating shorts are being squeezed."
            ),
            score=8,
        )
    if count > 0:
        return BiasRating(
            rating="Moderate Potential",
            interpretation=f"{count} pairs show signs of short squeezes.",
            score=6,
        )
    return BiasRating(
        rating="Low Potential",
        interpretation="Few short squeeze setups observed.",
        score=4,
    )


def long_trap_candidates(
    top_long_trap: Sequence[SymbolSnapshot],
    min_volume: Decimal = CANDIDATE_VOLUME,
) -> BiasRating:
    """Rate the top long-trap list; more trapped longs scores lower."""
    count = _liquid(top_long_trap, min_volume)
    if count > 3:
        return BiasRating(
            rating="High Risk",
            interpretation=(
                f"Many pairs ({count}) show price depreciation with positive funding, "
                "indicating longs are trapped."
            ),
            score=2,
        )
    if count > 0:
        return BiasRating(
            rating="Moderate Risk",
            interpretation=f"{count} pairs show signs of long traps.",
            score=4,
        )
    return BiasRating(
        rating="Low Risk",
        interpretation="Few long trap setups observed.",
        score=6,
    )


def volume_sentiment(
    snapshots: Sequence[SymbolSnapshot],
    min_volume: Decimal = HEAVY_VOLUME,
) -> BiasRating:
    """Compare how many heavy-volume symbols are rising vs falling."""
    rising = sum(1 for s in snapshots if s.price_change_percent > 0 and s.volume > min_volume)
    falling = sum(1 for s in snapshots if s.price_change_percent < 0 and s.volume > min_volume)

    if rising > falling * 2:
        return BiasRating(
            rating="Strong Bullish Volume",
            interpretation="Significant volume flowing into rising assets, confirming upward momentum.",
            score=7.5,
        )
    if falling > rising * 2:
        return BiasRating(
            rating="Strong Bearish Volume",
            interpretation="Significant volume flowing out of falling assets, confirming downward momentum.",
            score=3.5,
        )
    return BiasRating(
        rating="Mixed Volume",
        interpretation="Volume distribution is relatively balanced or not indicative of a strong trend.",
        score=5,
    )


def actionable_summary(setups: Iterable[SymbolSetup]) -> ActionableSummary:
    """Count Bullish Opportunity vs Bearish Risk setups and pick the leaning side."""
    bullish = 0
    bearish = 0
    for s in setups:
        if s.setup == "Bullish Opportunity":
            bullish += 1
        elif s.setup == "Bearish Risk":
            bearish += 1

    if bullish > bearish:
        return ActionableSummary(
            bullish_count=bullish,
            bearish_count=bearish,
            tone="Bullish",
            interpretation=(
                f"Market shows more bullish opportunities ({bullish}) than bearish risks ({bearish})."
            ),
            score=7,
        )
    if bearish > bullish:
        return ActionableSummary(
            bullish_count=bullish,
            bearish_count=bearish,
            tone="Bearish",
            interpretation=(
                f"Market shows more bearish risks ({bearish}) than bullish opportunities ({bullish})."
            ),
            score=3,
        )
    return ActionableSummary(
        bullish_count=bullish,
        bearish_count=bearish,
        interpretation=f"Bullish opportunities and bearish risks are balanced ({bullish} each).",
        score=5,
    )


# (minimum average score, tone, suggestion), checked top to bottom
OUTLOOK_BANDS: tuple[tuple[float, str, str], ...] = (
    (
        7.5,
        "Strongly Bullish",
        "Consider aggressive long positions with tight risk management. "
        "Focus on strong fundamental projects.",
    ),
    (
        6.0,
        "Moderately Bullish",
        "Cautiously seek long opportunities, consider consolidating positions. "
        "Monitor key resistance levels.",
    ),
    (
        4.5,
        "Neutral/Volatile",
        "Market is indecisive. Consider range trading or wait for clearer signals. "
        "High volatility is possible.",
    ),
    (
        3.0,
        "Moderately Bearish",
        "Consider shorting opportunities or reducing long exposure. "
        "Monitor key support levels carefully.",
    ),
)
BEARISH_FLOOR = (
    "Strongly Bearish",
    "Favor short positions or remain in cash. Protect capital as further downside is likely.",
)


def market_outlook(scores: Sequence[float]) -> MarketOutlook:
    """Average *scores* and map the result to an outlook band.

    An empty score list averages to the neutral 5.
    """
    average = sum(scores) / len(scores) if scores else 5.0
    tone, suggestion = BEARISH_FLOOR
    for floor, band_tone, band_suggestion in OUTLOOK_BANDS:
        if average >= floor:
            tone, suggestion = band_tone, band_suggestion
            break
    return MarketOutlook(score=round(average, 2), tone=tone, strategy_suggestion=suggestion)
