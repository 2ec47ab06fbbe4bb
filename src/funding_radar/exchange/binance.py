"""Binance USD-M futures client — public REST market data."""

from __future__ import annotations

import asyncio
from typing import Any

import httpx


class BinanceFuturesClient:
    """Async client for the three public endpoints one aggregation cycle needs."""

    def __init__(
        self,
        base_url: str = "https://fapi.binance.com",
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def _get_http(self) -> httpx.AsyncClient:
        if self._http is None or self._http.is_closed:
            self._http = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._http

    async def close(self) -> None:
        if self._http and not self._http.is_closed:
            await self._http.aclose()

    async def _get(self, path: str, params: dict | None = None) -> Any:
        http = await self._get_http()
        resp = await http.get(f"{self.base_url}{path}", params=params)
        resp.raise_for_status()
        return resp.json()

    async def get_exchange_info(self) -> list[dict]:
        """Instrument metadata: the ``symbols`` array of exchangeInfo."""
        body = await self._get("/fapi/v1/exchangeInfo")
        if isinstance(body, dict) and isinstance(body.get("symbols"), list):
            return body["symbols"]
        return []

    async def get_ticker_24hr(self) -> list[dict]:
        """24h rolling ticker statistics for every symbol."""
        body = await self._get("/fapi/v1/ticker/24hr")
        return body if isinstance(body, list) else []

    async def get_premium_index(self) -> list[dict]:
        """Mark price and last funding rate for every symbol."""
        body = await self._get("/fapi/v1/premiumIndex")
        return body if isinstance(body, list) else []

    async def fetch_market(self) -> tuple[list[dict], list[dict], list[dict]]:
        """Fetch instruments, tickers and funding concurrently.

        Returns (instruments, tickers, funding). Any failing request raises
        and the whole fetch fails; there is no partial result.
        """
        instruments, tickers, funding = await asyncio.gather(
            self.get_exchange_info(),
            self.get_ticker_24hr(),
            self.get_premium_index(),
        )
        return instruments, tickers, funding
