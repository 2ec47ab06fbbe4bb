"""Per-cycle analysis models — counts, dominance, signals, narrative."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from funding_radar.models.market import SymbolSnapshot

DominantSide = Literal["bullish", "bearish", "balanced"]


class ClassificationCounts(BaseModel):
    """Price-direction x funding-sign tally for one cycle."""

    model_config = ConfigDict(frozen=True)

    green: int = 0
    red: int = 0
    green_pos_funding: int = 0
    green_neg_funding: int = 0
    red_pos_funding: int = 0
    red_neg_funding: int = 0

    @property
    def total(self) -> int:
        return self.green + self.red


class VolumeDominance(BaseModel):
    """Green vs red share of a volume-like quantity."""

    green_total: Decimal = Decimal(0)
    red_total: Decimal = Decimal(0)
    dominant: DominantSide = "balanced"
    green_pct: float = 0.0
    red_pct: float = 0.0


class AmplitudeDominance(BaseModel):
    """Volume-weighted amplitude split between bullish and bearish candles."""

    bullish_weighted: Decimal = Decimal(0)
    bearish_weighted: Decimal = Decimal(0)
    dominant: DominantSide = "balanced"
    bullish_pct: float = 0.0
    bearish_pct: float = 0.0


class DominanceSummary(BaseModel):
    """All dominance outputs plus the divergence rankings."""

    liquidity: VolumeDominance = Field(default_factory=VolumeDominance)
    transaction: VolumeDominance = Field(default_factory=VolumeDominance)
    amplitude: AmplitudeDominance = Field(default_factory=AmplitudeDominance)
    top_short_squeeze: list[SymbolSnapshot] = Field(default_factory=list)
    top_long_trap: list[SymbolSnapshot] = Field(default_factory=list)

    @property
    def green_liquidity(self) -> Decimal:
        return self.liquidity.green_total

    @property
    def red_liquidity(self) -> Decimal:
        return self.liquidity.red_total

    @property
    def green_txn_volume(self) -> Decimal:
        return self.transaction.green_total

    @property
    def red_txn_volume(self) -> Decimal:
        return self.transaction.red_total

    @property
    def bullish_ampl_weighted(self) -> Decimal:
        return self.amplitude.bullish_weighted

    @property
    def bearish_ampl_weighted(self) -> Decimal:
        return self.amplitude.bearish_weighted


class TradeSignal(BaseModel):
    """Directional signal with fixed-percentage risk levels."""

    symbol: str
    direction: Literal["LONG", "SHORT", "NONE"]
    entry: Decimal | None = None
    stop_loss: Decimal | None = None
    take_profit: Decimal | None = None


class Narrative(BaseModel):
    """Market-wide conclusion picked by the narrative rule list."""

    key: str
    text: str


class BiasRating(BaseModel):
    rating: str
    interpretation: str
    score: float


class ActionableSummary(BaseModel):
    """Bullish Opportunity vs Bearish Risk setup counts for one cycle."""

    bullish_count: int = 0
    bearish_count: int = 0
    tone: Literal["Bullish", "Bearish", "Neutral"] = "Neutral"
    interpretation: str = ""
    score: float = 5.0


class MarketOutlook(BaseModel):
    """Average of the component scores mapped to a tone and a suggested stance."""

    score: float
    tone: Literal[
        "Strongly Bullish",
        "Moderately Bullish",
        "Neutral/Volatile",
        "Moderately Bearish",
        "Strongly Bearish",
    ]
    strategy_suggestion: str


class SymbolSetup(BaseModel):
    """Volume-gated per-symbol sentiment setup."""

    symbol: str
    setup: Literal[
        "Early Squeeze Signal",
        "Early Long Trap",
        "Bullish Opportunity",
        "Bearish Risk",
        "Neutral",
    ]
    reason: str
    price_change_percent: Decimal
    strong: bool = False
    risk_reward: Literal["Low", "Medium", "Medium-High", "High", "Strong"] = "Medium"


class MarketAnalysis(BaseModel):
    """Everything one aggregation cycle publishes."""

    ts: datetime
    total_symbols: int
    counts: ClassificationCounts
    dominance: DominanceSummary
    trade_signals: list[TradeSignal] = Field(default_factory=list)
    narrative: Narrative
    general_bias: BiasRating
    funding_imbalance: BiasRating
    short_squeeze_candidates: BiasRating
    long_trap_candidates: BiasRating
    volume_sentiment: BiasRating
    actionable_summary: ActionableSummary
    outlook: MarketOutlook
    setups: list[SymbolSetup] = Field(default_factory=list)
