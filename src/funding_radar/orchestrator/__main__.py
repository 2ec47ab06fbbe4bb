"""Allow running the poller as: python -m funding_radar.orchestrator [--config path]."""

from funding_radar.orchestrator.runner import cli

cli()
