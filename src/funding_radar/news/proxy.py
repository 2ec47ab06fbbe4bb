"""News proxy — validates requests, caches NewsAPI searches per query fingerprint."""

from __future__ import annotations

from funding_radar.errors import ConfigurationMissingError, InvalidRequestError
from funding_radar.exchange.newsapi import NewsApiClient
from funding_radar.logging import get_logger
from funding_radar.models import NewsArticle
from funding_radar.news.cache import TTLCache, cache_key

log = get_logger(__name__)

MAX_PAGE_SIZE = 100  # NewsAPI upper bound


def simplify_article(raw: dict) -> NewsArticle:
    """Reduce a NewsAPI article to title / url / source name / publishedAt."""
    source = raw.get("source")
    source_name = source.get("name") if isinstance(source, dict) else None
    return NewsArticle(
        title=raw.get("title") or "",
        url=raw.get("url") or "",
        source=source_name or "",
        publishedAt=raw.get("publishedAt") or "",
    )


def parse_page_size(raw: str | int | None, default: int) -> int:
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise InvalidRequestError(f"Invalid pageSize: {raw!r}") from None
    if value < 1:
        raise InvalidRequestError(f"Invalid pageSize: {raw!r}")
    return min(value, MAX_PAGE_SIZE)


class NewsProxy:
    """Cached front for NewsAPI search.

    The client is created on first use so a missing API key only fails
    requests, not application startup.
    """

    def __init__(
        self,
        api_key: str | None,
        cache: TTLCache,
        *,
        base_url: str = "https://newsapi.org",
        language: str = "en",
        default_sort: str = "relevancy",
        default_page_size: int = 5,
        client: NewsApiClient | None = None,
    ) -> None:
        self.api_key = api_key
        self.cache = cache
        self.base_url = base_url
        self.language = language
        self.default_sort = default_sort
        self.default_page_size = default_page_size
        self._client = client

    def _get_client(self) -> NewsApiClient:
        if self._client is None:
            self._client = NewsApiClient(
                api_key=self.api_key or "",
                base_url=self.base_url,
                language=self.language,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()

    async def search(
        self,
        query: str | None,
        sort: str | None = None,
        page_size: str | int | None = None,
    ) -> list[NewsArticle]:
        """Return simplified articles for *query*, from cache when fresh.

        Raises:
            InvalidRequestError: query missing/blank or pageSize malformed.
            ConfigurationMissingError: no NewsAPI key configured.
            UpstreamError: NewsAPI failed or answered with an error body.
        """
        if query is None or not query.strip():
            raise InvalidRequestError("Missing or invalid query parameter")
        sort_by = sort or self.default_sort
        size = parse_page_size(page_size, self.default_page_size)

        if not self.api_key:
            log.error("newsapi_key_missing")
            raise ConfigurationMissingError("Server configuration error: API key missing.")

        key = cache_key(query, sort_by, size)
        client = self._get_client()

        async def fetch() -> list[NewsArticle]:
            log.info("news_cache_miss", query=query, sort=sort_by, page_size=size)
            raw = await client.search(query, sort_by=sort_by, page_size=size)
            return [simplify_article(a) for a in raw]

        return await self.cache.get_or_fetch(key, fetch)
