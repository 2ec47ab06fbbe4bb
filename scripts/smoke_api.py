#!/usr/bin/env python3
"""Smoke test a running Funding Radar API."""

import asyncio
import json

import httpx

BASE_URL = "http://localhost:8000"


async def smoke_endpoints():
    """Hit each endpoint once and print a short summary."""
    async with httpx.AsyncClient(timeout=30.0) as client:
        print("Smoke testing Funding Radar API...\n")

        print("1. /api/health")
        try:
            response = await client.get(f"{BASE_URL}/api/health")
            print(f"   Status: {response.status_code}")
            print(f"   Response: {json.dumps(response.json(), indent=2)}\n")
        except httpx.HTTPError as e:
            print(f"   Error: {e}\n")

        print("2. /api/market")
        try:
            response = await client.get(f"{BASE_URL}/api/market")
            print(f"   Status: {response.status_code}")
            if response.status_code == 200:
                data = response.json()
                counts = data["counts"]
                print(f"   Symbols: {data['total_symbols']}  green={counts['green']} red={counts['red']}")
                print(f"   Liquidity: {data['dominance']['liquidity']['dominant']}")
                print(f"   Amplitude: {data['dominance']['amplitude']['dominant']}")
                print(f"   Narrative: {data['narrative']['text']}")
                print(f"   Outlook: {data['outlook']['tone']} ({data['outlook']['score']})\n")
        except httpx.HTTPError as e:
            print(f"   Error: {e}\n")

        print("3. /api/market/signals?direction=LONG")
        try:
            response = await client.get(f"{BASE_URL}/api/market/signals", params={"direction": "LONG"})
            print(f"   Status: {response.status_code}")
            if response.status_code == 200:
                signals = response.json()["signals"]
                print(f"   Long signals: {len(signals)}")
                for s in signals[:3]:
                    print(f"   - {s['symbol']}: entry {s['entry']} SL {s['stop_loss']} TP {s['take_profit']}")
                print()
        except httpx.HTTPError as e:
            print(f"   Error: {e}\n")

        print("4. /api/news?query=bitcoin (twice; the second is served from cache)")
        for attempt in (1, 2):
            try:
                response = await client.get(f"{BASE_URL}/api/news", params={"query": "bitcoin"})
                print(f"   [{attempt}] Status: {response.status_code}")
                data = response.json()
                if response.status_code == 200:
                    print(f"   [{attempt}] {len(data['articles'])} articles, tone: {data['tone']}")
                else:
                    print(f"   [{attempt}] {data}")
            except httpx.HTTPError as e:
                print(f"   Error: {e}")


if __name__ == "__main__":
    asyncio.run(smoke_endpoints())
