"""Config loader — reads YAML, applies RADAR_* env var overrides."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from funding_radar.config.schema import AppConfig

# env var -> (section, key)
_ENV_OVERRIDES = {
    "RADAR_LOG_LEVEL": ("logging", "level"),
    "RADAR_LOG_FORMAT": ("logging", "format"),
    "RADAR_BINANCE_URL": ("binance", "base_url"),
    "RADAR_POLL_INTERVAL_S": ("binance", "poll_interval_s"),
    "RADAR_NEWSAPI_KEY": ("news", "api_key"),
    "RADAR_NEWS_TTL_S": ("news", "ttl_s"),
}


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from a YAML file, then apply env var overrides.

    If *path* is None or the file doesn't exist, returns defaults.

    Environment variable overrides:
        RADAR_LOG_LEVEL        -> logging.level
        RADAR_LOG_FORMAT       -> logging.format
        RADAR_BINANCE_URL      -> binance.base_url
        RADAR_POLL_INTERVAL_S  -> binance.poll_interval_s
        RADAR_NEWSAPI_KEY      -> news.api_key (falls back to NEWSAPI_KEY)
        RADAR_NEWS_TTL_S       -> news.ttl_s
    """
    data: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            with open(p) as f:
                data = yaml.safe_load(f) or {}

    for env_name, (section, key) in _ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            data.setdefault(section, {})[key] = value

    # NEWSAPI_KEY is the name the upstream docs use
    legacy_key = os.environ.get("NEWSAPI_KEY")
    if legacy_key and not data.get("news", {}).get("api_key"):
        data.setdefault("news", {})["api_key"] = legacy_key

    return AppConfig.model_validate(data)
