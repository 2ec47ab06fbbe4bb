"""Tests for raw payload parsing and the snapshot join."""

from __future__ import annotations

from decimal import Decimal

from funding_radar.engine.join import (
    build_snapshots,
    parse_funding,
    parse_number,
    parse_ticker,
)

INSTRUMENTS = [
    {"symbol": "BTCUSDT", "contractType": "PERPETUAL", "quoteAsset": "USDT"},
    {"symbol": "ETHUSDT", "contractType": "PERPETUAL", "quoteAsset": "USDT"},
    {"symbol": "BTCUSDT_250926", "contractType": "CURRENT_QUARTER", "quoteAsset": "USDT"},
    {"symbol": "BTCUSDC", "contractType": "PERPETUAL", "quoteAsset": "USDC"},
]


def _ticker(symbol: str, **overrides) -> dict:
    t = {
        "symbol": symbol,
        "priceChangePercent": "2.000",
        "lastPrice": "102.0",
        "openPrice": "100.0",
        "highPrice": "105.0",
        "lowPrice": "99.0",
        "quoteVolume": "1000.0",
    }
    t.update(overrides)
    return t


class TestParseNumber:
    def test_numeric_string(self):
        assert parse_number("-0.00012500") == Decimal("-0.000125")

    def test_numbers(self):
        assert parse_number(3) == Decimal(3)
        assert parse_number(1.5) == Decimal("1.5")

    def test_missing_values(self):
        assert parse_number(None) is None
        assert parse_number("") is None
        assert parse_number("abc") is None
        assert parse_number(True) is None

    def test_non_finite(self):
        assert parse_number("NaN") is None
        assert parse_number("Infinity") is None


class TestRecordParsing:
    def test_ticker_keeps_missing_fields_as_none(self):
        t = parse_ticker({"symbol": "BTCUSDT", "lastPrice": "x"})
        assert t.symbol == "BTCUSDT"
        assert t.last_price is None
        assert t.quote_volume is None

    def test_record_without_symbol_is_dropped(self):
        assert parse_ticker({"lastPrice": "1"}) is None
        assert parse_funding({"symbol": ""}) is None


class TestBuildSnapshots:
    def test_joins_by_symbol(self):
        snaps = build_snapshots(
            INSTRUMENTS,
            [_ticker("BTCUSDT")],
            [{"symbol": "BTCUSDT", "lastFundingRate": "-0.0001"}],
        )
        assert len(snaps) == 1
        s = snaps[0]
        assert s.symbol == "BTCUSDT"
        assert s.price_change_percent == Decimal("2")
        assert s.funding_rate == Decimal("-0.0001")
        assert s.funding_known is True
        assert s.volume == Decimal("1000")
        assert s.close_price == s.last_price == Decimal("102")

    def test_filters_non_perpetual_and_other_quote(self):
        tickers = [_ticker("BTCUSDT"), _ticker("BTCUSDT_250926"), _ticker("BTCUSDC")]
        snaps = build_snapshots(INSTRUMENTS, tickers, [])
        assert [s.symbol for s in snaps] == ["BTCUSDT"]

    def test_missing_funding_defaults_to_zero_and_unknown(self):
        snaps = build_snapshots(INSTRUMENTS, [_ticker("ETHUSDT")], [])
        assert snaps[0].funding_rate == 0
        assert snaps[0].funding_known is False

    def test_non_numeric_funding_defaults_to_zero(self):
        snaps = build_snapshots(
            INSTRUMENTS,
            [_ticker("ETHUSDT")],
            [{"symbol": "ETHUSDT", "lastFundingRate": "n/a"}],
        )
        assert snaps[0].funding_rate == 0
        assert snaps[0].funding_known is False

    def test_missing_ticker_excludes_symbol(self):
        snaps = build_snapshots(
            INSTRUMENTS,
            [_ticker("BTCUSDT")],
            [{"symbol": "ETHUSDT", "lastFundingRate": "0.0002"}],
        )
        assert [s.symbol for s in snaps] == ["BTCUSDT"]

    def test_zero_or_missing_volume_filtered(self):
        tickers = [
            _ticker("BTCUSDT", quoteVolume="0"),
            _ticker("ETHUSDT", quoteVolume=None),
        ]
        assert build_snapshots(INSTRUMENTS, tickers, []) == []

    def test_zero_open_price_filtered(self):
        tickers = [_ticker("BTCUSDT", openPrice="0.0"), _ticker("ETHUSDT", openPrice="bad")]
        assert build_snapshots(INSTRUMENTS, tickers, []) == []

    def test_non_numeric_change_coerced_to_zero(self):
        snaps = build_snapshots(INSTRUMENTS, [_ticker("BTCUSDT", priceChangePercent="?")], [])
        assert snaps[0].price_change_percent == 0

    def test_garbage_records_do_not_fail_the_cycle(self):
        snaps = build_snapshots(
            INSTRUMENTS + ["junk", None],
            [_ticker("BTCUSDT"), 42, {"no": "symbol"}],
            [None, {"symbol": "BTCUSDT", "lastFundingRate": "0.0001"}],
        )
        assert len(snaps) == 1
        assert snaps[0].funding_rate == Decimal("0.0001")

    def test_empty_inputs(self):
        assert build_snapshots([], [], []) == []
