"""Shared test fixtures."""

from __future__ import annotations

from decimal import Decimal

import pytest

from funding_radar.models import SymbolSnapshot


def _d(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


@pytest.fixture
def make_snapshot():
    """Factory for SymbolSnapshot with sensible defaults.

    ``close`` defaults to ``last`` and ``open`` is derived from the price
    change so candles point the same way as the 24h change.
    """

    def _make(
        symbol: str = "BTCUSDT",
        change: float | str = 1.0,
        funding: float | str = 0.0001,
        volume: float | str = 1000,
        last: float | str = 100,
        open_: float | str | None = None,
        high: float | str | None = None,
        low: float | str | None = None,
        close: float | str | None = None,
    ) -> SymbolSnapshot:
        pc = _d(change)
        last_d = _d(last)
        open_d = _d(open_) if open_ is not None else last_d / (1 + pc / 100)
        close_d = _d(close) if close is not None else last_d
        return SymbolSnapshot(
            symbol=symbol,
            price_change_percent=pc,
            funding_rate=_d(funding),
            last_price=last_d,
            volume=_d(volume),
            open_price=open_d,
            high_price=_d(high) if high is not None else max(open_d, close_d),
            low_price=_d(low) if low is not None else min(open_d, close_d),
            close_price=close_d,
        )

    return _make
