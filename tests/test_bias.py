"""Tests for market bias ratings and per-symbol setups."""

from __future__ import annotations

from decimal import Decimal

import pytest

from funding_radar.engine.bias import (
    actionable_summary,
    funding_imbalance,
    general_bias,
    long_trap_candidates,
    market_outlook,
    short_squeeze_candidates,
    volume_sentiment,
)
from funding_radar.engine.setups import detect_setup, detect_setups, format_volume
from funding_radar.models import ClassificationCounts, SymbolSetup

BIG = 120_000_000
MID = 60_000_000
SMALL = 1_000_000


class TestGeneralBias:
    @pytest.mark.parametrize(
        "green,red,rating",
        [
            (16, 10, "Strongly Bullish"),
            (10, 16, "Strongly Bearish"),
            (12, 10, "Slightly Bullish"),
            (10, 12, "Slightly Bearish"),
            (10, 10, "Neutral"),
            (0, 0, "Neutral"),
        ],
    )
    def test_ratings(self, green, red, rating):
        counts = ClassificationCounts(green=green, red=red, green_pos_funding=green, red_pos_funding=red)
        assert general_bias(counts).rating == rating


class TestFundingImbalance:
    def test_bullish_recovery_when_few_traps(self, make_snapshot):
        r = funding_imbalance([make_snapshot(change=-1, funding=0.0001)])
        assert r.rating == "Bullish Weak Trap Recovery"
        assert r.score == 8.0

    def test_bearish_skew(self, make_snapshot):
        snaps = [make_snapshot(f"S{i}", change=-1, funding=0.0001) for i in range(231)]
        r = funding_imbalance(snaps)
        assert r.rating == "Bearish Trap Skew"
        assert "231" in r.interpretation

    def test_mixed_when_many_squeezes(self, make_snapshot):
        snaps = [make_snapshot(f"S{i}", change=1, funding=-0.0001) for i in range(30)]
        assert funding_imbalance(snaps).rating == "Mixed/Neutral Funding"


class TestCandidateRatings:
    def test_short_squeeze_high_potential(self, make_snapshot):
        top = [make_snapshot(f"S{i}", change=1, funding=-0.001, volume=MID) for i in range(4)]
        r = short_squeeze_candidates(top)
        assert r.rating == "High Potential"
        assert r.score == 8

    def test_short_squeeze_counts_only_liquid_candidates(self, make_snapshot):
        top = [make_snapshot("A", change=1, funding=-0.001, volume=MID)] + [
            make_snapshot(f"S{i}", change=1, funding=-0.001, volume=SMALL) for i in range(4)
        ]
        r = short_squeeze_candidates(top)
        assert r.rating == "Moderate Potential"
        assert r.score == 6
        assert r.interpretation.startswith("1 pairs")

    def test_short_squeeze_volume_must_exceed_threshold(self, make_snapshot):
        top = [make_snapshot(change=1, funding=-0.001, volume=50_000_000)]
        assert short_squeeze_candidates(top).rating == "Low Potential"
        assert short_squeeze_candidates([]).score == 4

    @pytest.mark.parametrize(
        "liquid,rating,score",
        [(4, "High Risk", 2), (2, "Moderate Risk", 4), (0, "Low Risk", 6)],
    )
    def test_long_trap(self, make_snapshot, liquid, rating, score):
        top = [make_snapshot(f"S{i}", change=-1, funding=0.001, volume=MID) for i in range(liquid)]
        r = long_trap_candidates(top)
        assert r.rating == rating
        assert r.score == score


class TestVolumeSentiment:
    def test_strong_bullish(self, make_snapshot):
        snaps = [make_snapshot(f"U{i}", change=2, volume=BIG) for i in range(3)]
        snaps.append(make_snapshot("D", change=-2, volume=BIG))
        r = volume_sentiment(snaps)
        assert r.rating == "Strong Bullish Volume"
        assert r.score == 7.5

    def test_strong_bearish(self, make_snapshot):
        snaps = [make_snapshot(f"D{i}", change=-2, volume=BIG) for i in range(3)]
        snaps.append(make_snapshot("U", change=2, volume=BIG))
        assert volume_sentiment(snaps).score == 3.5

    def test_light_volume_ignored(self, make_snapshot):
        snaps = [make_snapshot(f"U{i}", change=2, volume=MID) for i in range(5)]
        r = volume_sentiment(snaps)
        assert r.rating == "Mixed Volume"
        assert r.score == 5

    def test_exactly_double_is_mixed(self, make_snapshot):
        snaps = [make_snapshot(f"U{i}", change=2, volume=BIG) for i in range(2)]
        snaps.append(make_snapshot("D", change=-2, volume=BIG))
        assert volume_sentiment(snaps).rating == "Mixed Volume"


def _setup(name: str) -> SymbolSetup:
    return SymbolSetup(symbol="X", setup=name, reason="", price_change_percent=Decimal(1))


class TestActionableSummary:
    def test_bullish(self):
        s = actionable_summary([_setup("Bullish Opportunity"), _setup("Bullish Opportunity"), _setup("Bearish Risk")])
        assert (s.bullish_count, s.bearish_count) == (2, 1)
        assert s.tone == "Bullish"
        assert s.score == 7

    def test_bearish(self):
        s = actionable_summary([_setup("Bearish Risk"), _setup("Early Squeeze Signal")])
        assert s.tone == "Bearish"
        assert s.score == 3

    def test_other_setups_do_not_count(self):
        s = actionable_summary([_setup("Early Long Trap"), _setup("Neutral")])
        assert (s.bullish_count, s.bearish_count) == (0, 0)
        assert s.tone == "Neutral"
        assert s.score == 5
        assert "0 each" in s.interpretation


class TestMarketOutlook:
    @pytest.mark.parametrize(
        "scores,tone",
        [
            ([8, 7], "Strongly Bullish"),
            ([6, 6], "Moderately Bullish"),
            ([5, 4], "Neutral/Volatile"),
            ([3, 4], "Moderately Bearish"),
            ([2, 3.5], "Strongly Bearish"),
        ],
    )
    def test_bands(self, scores, tone):
        assert market_outlook(scores).tone == tone

    def test_score_is_rounded_average(self):
        o = market_outlook([8.5, 8.0, 4, 6, 5, 7])
        assert o.score == pytest.approx(6.42)
        assert o.tone == "Moderately Bullish"
        assert "resistance" in o.strategy_suggestion

    def test_empty_is_neutral(self):
        o = market_outlook([])
        assert o.score == 5.0
        assert o.tone == "Neutral/Volatile"


class TestSetups:
    def test_early_squeeze(self, make_snapshot):
        s = detect_setup(make_snapshot(change=5, funding=-0.0002, volume=BIG))
        assert s.setup == "Early Squeeze Signal"
        assert s.strong is True
        assert s.risk_reward == "Strong"
        assert "$120.0M" in s.reason

    def test_early_long_trap(self, make_snapshot):
        s = detect_setup(make_snapshot(change=-2.5, funding=0.0002, volume=MID))
        assert s.setup == "Early Long Trap"
        assert s.strong is False
        assert s.risk_reward == "Medium-High"

    def test_bullish_opportunity_with_zero_funding(self, make_snapshot):
        s = detect_setup(make_snapshot(change=4, funding=0, volume=BIG))
        assert s.setup == "Bullish Opportunity"
        assert s.strong is True
        assert s.risk_reward == "High"

    def test_bearish_risk_with_zero_funding_is_neutral(self, make_snapshot):
        # 0 < 0.0001 so neither long-trap nor bearish-risk applies
        s = detect_setup(make_snapshot(change=-1, funding=0, volume=BIG))
        assert s.setup == "Neutral"
        assert s.risk_reward == "Low"

    def test_low_volume_is_neutral(self, make_snapshot):
        assert detect_setup(make_snapshot(change=5, funding=-0.001, volume=SMALL)).setup == "Neutral"

    def test_extreme_move_is_neutral(self, make_snapshot):
        assert detect_setup(make_snapshot(change=12, funding=-0.001, volume=BIG)).setup == "Neutral"

    def test_custom_threshold(self, make_snapshot):
        snaps = [make_snapshot(change=1, funding=-0.001, volume=SMALL)]
        setups = detect_setups(snaps, volume_threshold=Decimal(500_000))
        assert setups[0].setup == "Early Squeeze Signal"


class TestFormatVolume:
    def test_billions(self):
        assert format_volume(Decimal("2340000000")) == "$2.3B"

    def test_millions(self):
        assert format_volume(Decimal("56700000")) == "$56.7M"

    def test_small(self):
        assert format_volume(Decimal("12345")) == "$12,345"
