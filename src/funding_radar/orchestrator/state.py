"""Published market state — the last successfully computed analysis."""

from __future__ import annotations

from datetime import datetime, timezone

from funding_radar.models import MarketAnalysis


class MarketState:
    """Holds the latest MarketAnalysis.

    Only a completed cycle replaces it; a failed cycle leaves the previous
    analysis in place.
    """

    def __init__(self) -> None:
        self._latest: MarketAnalysis | None = None
        self.updated_at: datetime | None = None
        self.cycles_published = 0
        self.cycles_failed = 0

    @property
    def latest(self) -> MarketAnalysis | None:
        return self._latest

    def publish(self, analysis: MarketAnalysis) -> None:
        self._latest = analysis
        self.updated_at = datetime.now(timezone.utc)
        self.cycles_published += 1

    def record_failure(self) -> None:
        self.cycles_failed += 1
