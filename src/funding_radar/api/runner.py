#!/usr/bin/env python3
"""FastAPI server runner."""

import argparse

import uvicorn
import structlog

from funding_radar.api.app import create_app
from funding_radar.config.loader import load_config
from funding_radar.logging.setup import setup_logging

logger = structlog.get_logger()


def main():
    """Run the FastAPI server with the market poller attached."""
    parser = argparse.ArgumentParser(description="Funding radar API server")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(level=config.logging.level, log_format=config.logging.format)

    logger.info("Starting FastAPI server", host=config.api.host, port=config.api.port)

    try:
        uvicorn.run(
            create_app(config),
            host=config.api.host,
            port=config.api.port,
            log_config=None  # Use our structlog setup
        )
    except Exception as e:
        logger.error("Failed to start server", error=str(e))
        raise


if __name__ == "__main__":
    main()
