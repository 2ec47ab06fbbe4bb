"""Configuration system."""

from funding_radar.config.loader import load_config
from funding_radar.config.schema import AppConfig

__all__ = ["AppConfig", "load_config"]
