"""Configuration schema — Pydantic models for config.yaml."""

from __future__ import annotations

from pydantic import BaseModel, Field


class BinanceConfig(BaseModel):
    base_url: str = "https://fapi.binance.com"
    poll_interval_s: int = 30
    quote_asset: str = "USDT"
    contract_type: str = "PERPETUAL"


class AnalysisConfig(BaseModel):
    top_n: int = 5
    setup_volume_threshold: float = 50_000_000
    setup_strong_volume: float = 100_000_000


class NewsConfig(BaseModel):
    base_url: str = "https://newsapi.org"
    api_key: str | None = None
    ttl_s: float = 3600
    language: str = "en"
    default_sort: str = "relevancy"
    default_page_size: int = 5


class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "json"


class AppConfig(BaseModel):
    binance: BinanceConfig = Field(default_factory=BinanceConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    news: NewsConfig = Field(default_factory=NewsConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
