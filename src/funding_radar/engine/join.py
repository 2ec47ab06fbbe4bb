"""Snapshot join — raw exchangeInfo / ticker / premiumIndex payloads to SymbolSnapshots.

Parsing never raises. A numeric field that is absent, non-numeric, NaN or
infinite parses to ``None`` (missing) and the join picks every default
explicitly rather than letting a coercion produce zero behind its back.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from typing import Any

from funding_radar.models import FundingRate, InstrumentRef, SymbolSnapshot, TickerStat

ZERO = Decimal(0)


def parse_number(raw: Any) -> Decimal | None:
    """Parse an upstream numeric field (Binance sends strings) or return None."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError):
        return None
    if not value.is_finite():
        return None
    return value


def _or(value: Decimal | None, default: Decimal) -> Decimal:
    return default if value is None else value


def parse_instrument(raw: dict) -> InstrumentRef | None:
    symbol = raw.get("symbol")
    if not isinstance(symbol, str) or not symbol:
        return None
    return InstrumentRef(
        symbol=symbol,
        contract_type=str(raw.get("contractType") or ""),
        quote_asset=str(raw.get("quoteAsset") or ""),
    )


def parse_ticker(raw: dict) -> TickerStat | None:
    symbol = raw.get("symbol")
    if not isinstance(symbol, str) or not symbol:
        return None
    return TickerStat(
        symbol=symbol,
        price_change_percent=parse_number(raw.get("priceChangePercent")),
        last_price=parse_number(raw.get("lastPrice")),
        open_price=parse_number(raw.get("openPrice")),
        high_price=parse_number(raw.get("highPrice")),
        low_price=parse_number(raw.get("lowPrice")),
        quote_volume=parse_number(raw.get("quoteVolume")),
    )


def parse_funding(raw: dict) -> FundingRate | None:
    symbol = raw.get("symbol")
    if not isinstance(symbol, str) or not symbol:
        return None
    return FundingRate(symbol=symbol, last_funding_rate=parse_number(raw.get("lastFundingRate")))


def _parse_all(raws: Iterable[Any], parser) -> list:
    out = []
    for raw in raws:
        if not isinstance(raw, dict):
            continue
        parsed = parser(raw)
        if parsed is not None:
            out.append(parsed)
    return out


def join_snapshots(
    instruments: Iterable[InstrumentRef],
    tickers: Iterable[TickerStat],
    funding: Iterable[FundingRate],
    *,
    quote_asset: str = "USDT",
    contract_type: str = "PERPETUAL",
) -> list[SymbolSnapshot]:
    """Join typed records by exact symbol into retained snapshots.

    A symbol is kept when its instrument is a *contract_type* contract settled
    in *quote_asset* and a ticker exists for it. Missing funding defaults the
    rate to zero with ``funding_known=False``. Snapshots with non-positive
    volume or open price are dropped.
    """
    tracked = {
        i.symbol
        for i in instruments
        if i.contract_type == contract_type and i.quote_asset == quote_asset
    }
    funding_by_symbol = {f.symbol: f for f in funding}

    snapshots: list[SymbolSnapshot] = []
    for t in tickers:
        if t.symbol not in tracked:
            continue

        volume = _or(t.quote_volume, ZERO)
        open_price = _or(t.open_price, ZERO)
        if volume <= 0 or open_price <= 0:
            continue

        f = funding_by_symbol.get(t.symbol)
        rate = f.last_funding_rate if f is not None else None
        last_price = _or(t.last_price, ZERO)

        snapshots.append(
            SymbolSnapshot(
                symbol=t.symbol,
                price_change_percent=_or(t.price_change_percent, ZERO),
                funding_rate=_or(rate, ZERO),
                funding_known=rate is not None,
                last_price=last_price,
                volume=volume,
                open_price=open_price,
                high_price=_or(t.high_price, last_price),
                low_price=_or(t.low_price, last_price),
                close_price=last_price,
            )
        )
    return snapshots


def build_snapshots(
    raw_instruments: Iterable[Any],
    raw_tickers: Iterable[Any],
    raw_funding: Iterable[Any],
    *,
    quote_asset: str = "USDT",
    contract_type: str = "PERPETUAL",
) -> list[SymbolSnapshot]:
    """Parse three raw upstream collections and join them (see :func:`join_snapshots`)."""
    tickers: dict[str, TickerStat] = {t.symbol: t for t in _parse_all(raw_tickers, parse_ticker)}
    return join_snapshots(
        _parse_all(raw_instruments, parse_instrument),
        tickers.values(),
        _parse_all(raw_funding, parse_funding),
        quote_asset=quote_asset,
        contract_type=contract_type,
    )
