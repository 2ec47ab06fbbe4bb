"""Sentiment narrative selector — first matching rule wins.

Several rules can hold at once; list order is the tie-break.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from funding_radar.models import ClassificationCounts, Narrative


@dataclass(frozen=True)
class NarrativeRule:
    key: str
    text: str
    matches: Callable[[ClassificationCounts], bool]


def _green_ratio(c: ClassificationCounts) -> float:
    return c.green / c.total


def _red_ratio(c: ClassificationCounts) -> float:
    return c.red / c.total


NARRATIVE_RULES: tuple[NarrativeRule, ...] = (
    NarrativeRule(
        key="bearish_trap",
        text="Bearish trap: longs keep paying funding while prices fall. Further unwinding likely.",
        matches=lambda c: c.red_pos_funding >= 30,
    ),
    NarrativeRule(
        key="bullish_squeeze",
        text="Short squeeze building: shorts are paying funding into rising prices.",
        matches=lambda c: c.green_neg_funding >= 20,
    ),
    NarrativeRule(
        key="bullish_momentum",
        text="Broad bullish momentum with shorts still leaning against the move.",
        matches=lambda c: _green_ratio(c) > 0.7 and c.green_neg_funding >= 10,
    ),
    NarrativeRule(
        key="bearish_breakdown",
        text="Broad breakdown: most pairs are red and longs are still paying.",
        matches=lambda c: _red_ratio(c) > 0.65 and c.red_pos_funding >= 20,
    ),
    NarrativeRule(
        key="mixed_signals",
        text="Mixed signals: squeeze and trap setups are both present. Stay selective.",
        matches=lambda c: c.green_neg_funding > 5 and c.red_pos_funding > 5,
    ),
)

NEUTRAL = Narrative(key="neutral", text="No dominant funding/price imbalance. Market is neutral.")


def select_narrative(
    counts: ClassificationCounts,
    rules: tuple[NarrativeRule, ...] = NARRATIVE_RULES,
) -> Narrative:
    """Evaluate *rules* top to bottom; neutral if none match or there is no data."""
    if counts.total == 0:
        return NEUTRAL
    for rule in rules:
        if rule.matches(counts):
            return Narrative(key=rule.key, text=rule.text)
    return NEUTRAL
