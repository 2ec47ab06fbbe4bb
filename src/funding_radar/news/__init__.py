"""News search proxy with a TTL response cache."""

from funding_radar.news.cache import CacheEntry, TTLCache, cache_key
from funding_radar.news.proxy import NewsProxy, simplify_article
from funding_radar.news.sentiment import headline_tone

__all__ = ["CacheEntry", "NewsProxy", "TTLCache", "cache_key", "headline_tone", "simplify_article"]
