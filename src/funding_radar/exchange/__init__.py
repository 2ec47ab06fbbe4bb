"""Upstream API clients."""

from funding_radar.exchange.binance import BinanceFuturesClient
from funding_radar.exchange.newsapi import NewsApiClient

__all__ = ["BinanceFuturesClient", "NewsApiClient"]
