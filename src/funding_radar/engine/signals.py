"""Trade signal generator — price/funding divergence to a directional signal.

Risk levels are fixed percentages of the last price, not a volatility model.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from funding_radar.models import SymbolSnapshot, TradeSignal

LONG_STOP_LOSS = Decimal("0.99")
LONG_TAKE_PROFIT = Decimal("1.02")
SHORT_STOP_LOSS = Decimal("1.01")
SHORT_TAKE_PROFIT = Decimal("0.98")


def generate_signal(snapshot: SymbolSnapshot) -> TradeSignal:
    """Exactly one of LONG / SHORT / NONE per snapshot.

    price up (or flat) + negative funding -> LONG  (shorts paying into a rally)
    price down + positive funding         -> SHORT (longs paying into a drop)
    """
    pc = snapshot.price_change_percent
    rate = snapshot.funding_rate
    entry = snapshot.last_price

    if pc >= 0 and rate < 0:
        return TradeSignal(
            symbol=snapshot.symbol,
            direction="LONG",
            entry=entry,
            stop_loss=entry * LONG_STOP_LOSS,
            take_profit=entry * LONG_TAKE_PROFIT,
        )
    if pc < 0 and rate > 0:
        return TradeSignal(
            symbol=snapshot.symbol,
            direction="SHORT",
            entry=entry,
            stop_loss=entry * SHORT_STOP_LOSS,
            take_profit=entry * SHORT_TAKE_PROFIT,
        )
    return TradeSignal(symbol=snapshot.symbol, direction="NONE")


def generate_signals(snapshots: Iterable[SymbolSnapshot]) -> list[TradeSignal]:
    return [generate_signal(s) for s in snapshots]
