"""NewsAPI client — the /v2/everything search endpoint.

NewsAPI answers errors either with a non-2xx status or with a 200 body of
``{"status": "error", "code": ..., "message": ...}``; both surface as
:class:`UpstreamError`.
"""

from __future__ import annotations

from typing import Any

import httpx

from funding_radar.errors import UpstreamError

# NewsAPI error code -> HTTP status we answer with
_ERROR_STATUS = {
    "apiKeyMissing": 401,
    "apiKeyInvalid": 401,
    "apiKeyDisabled": 401,
    "apiKeyExhausted": 401,
    "parametersMissing": 400,
    "parameterInvalid": 400,
    "sourcesTooMany": 400,
    "sourceDoesNotExist": 400,
    "rateLimited": 429,
}


class NewsApiClient:
    """Async client for NewsAPI article search."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://newsapi.org",
        language: str = "en",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.language = language
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(timeout=15.0, transport=self._transport)
        return self._http

    async def close(self) -> None:
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    async def search(self, query: str, sort_by: str = "relevancy", page_size: int = 5) -> list[dict]:
        """Search articles and return the raw article dicts."""
        http = await self._get_http()
        params: dict[str, Any] = {
            "q": query,
            "language": self.language,
            "sortBy": sort_by,
            "pageSize": page_size,
            "apiKey": self.api_key,
        }
        try:
            resp = await http.get(f"{self.base_url}/v2/everything", params=params)
        except httpx.RequestError as exc:
            raise UpstreamError(
                "No response received from external API.", status_code=503
            ) from exc

        body = _json_or_none(resp)
        if isinstance(body, dict) and body.get("status") == "error":
            code = body.get("code", "")
            raise UpstreamError(
                f"News API Error: {body.get('message', 'unknown error')}",
                status_code=_ERROR_STATUS.get(code, 500),
                code=code,
            )
        if resp.is_error:
            raise UpstreamError(
                f"External API error: {resp.reason_phrase or 'Unknown'}",
                status_code=resp.status_code,
                details=body,
            )
        if not isinstance(body, dict):
            return []
        articles = body.get("articles") or []
        return [a for a in articles if isinstance(a, dict)]


def _json_or_none(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return None
