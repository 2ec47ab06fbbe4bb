"""Market orchestrator — scheduled aggregation cycles and the published state."""

from funding_radar.orchestrator.runner import run_cycle, run_loop
from funding_radar.orchestrator.scheduler import TickScheduler
from funding_radar.orchestrator.state import MarketState

__all__ = ["MarketState", "TickScheduler", "run_cycle", "run_loop"]
