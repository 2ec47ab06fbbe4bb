"""Classification engine — green/red by price change, split by funding sign."""

from __future__ import annotations

from collections.abc import Iterable

from funding_radar.models import ClassificationCounts, SymbolSnapshot


def classify(snapshots: Iterable[SymbolSnapshot]) -> ClassificationCounts:
    """Tally snapshots into four mutually exclusive buckets.

    Green iff ``price_change_percent >= 0``; positive funding iff
    ``funding_rate >= 0``. Zero lands on the green / positive side in both.
    """
    green_pos = green_neg = red_pos = red_neg = 0
    for s in snapshots:
        positive_funding = s.funding_rate >= 0
        if s.is_green:
            if positive_funding:
                green_pos += 1
            else:
                green_neg += 1
        elif positive_funding:
            red_pos += 1
        else:
            red_neg += 1

    return ClassificationCounts(
        green=green_pos + green_neg,
        red=red_pos + red_neg,
        green_pos_funding=green_pos,
        green_neg_funding=green_neg,
        red_pos_funding=red_pos,
        red_neg_funding=red_neg,
    )
