"""Pydantic domain models."""

from funding_radar.models.analysis import (
    ActionableSummary,
    AmplitudeDominance,
    BiasRating,
    ClassificationCounts,
    DominanceSummary,
    MarketAnalysis,
    MarketOutlook,
    Narrative,
    SymbolSetup,
    TradeSignal,
    VolumeDominance,
)
from funding_radar.models.market import (
    FundingRate,
    InstrumentRef,
    SymbolSnapshot,
    TickerStat,
)
from funding_radar.models.news import NewsArticle

__all__ = [
    "ActionableSummary",
    "AmplitudeDominance",
    "BiasRating",
    "ClassificationCounts",
    "DominanceSummary",
    "FundingRate",
    "InstrumentRef",
    "MarketAnalysis",
    "MarketOutlook",
    "Narrative",
    "NewsArticle",
    "SymbolSetup",
    "SymbolSnapshot",
    "TickerStat",
    "TradeSignal",
    "VolumeDominance",
]
