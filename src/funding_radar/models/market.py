"""Market data models — raw upstream records and the joined per-symbol snapshot."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class InstrumentRef(BaseModel):
    """Static contract metadata from exchangeInfo."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    contract_type: str
    quote_asset: str


class TickerStat(BaseModel):
    """24h ticker statistics. ``None`` marks a field that was absent or non-numeric."""

    symbol: str
    price_change_percent: Decimal | None = None
    last_price: Decimal | None = None
    open_price: Decimal | None = None
    high_price: Decimal | None = None
    low_price: Decimal | None = None
    quote_volume: Decimal | None = None


class FundingRate(BaseModel):
    """Current funding rate from premiumIndex."""

    symbol: str
    last_funding_rate: Decimal | None = None


class SymbolSnapshot(BaseModel):
    """One symbol's joined market state for a single aggregation cycle.

    Retained snapshots always have ``volume > 0`` and ``open_price > 0``.
    ``funding_known`` is False when no funding record existed and the rate
    was defaulted to zero.
    """

    symbol: str
    price_change_percent: Decimal
    funding_rate: Decimal
    funding_known: bool = True
    last_price: Decimal
    volume: Decimal
    open_price: Decimal
    high_price: Decimal
    low_price: Decimal
    close_price: Decimal

    @property
    def is_green(self) -> bool:
        # Zero change counts as green.
        return self.price_change_percent >= 0
