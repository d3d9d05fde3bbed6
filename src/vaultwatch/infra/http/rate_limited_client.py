import asyncio
import time

import httpx


class RateLimitedClient:
    """Paces JSON-RPC POSTs so the RPC node sees at most ``rate_per_second`` requests."""

    def __init__(self, rate_per_second: float = 5.0, timeout: float = 30.0, client: httpx.AsyncClient | None = None) -> None:
        self._interval = 1.0 / rate_per_second
        self._next_allowed = 0.0
        self._lock = asyncio.Lock()
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def post(self, url: str, json: dict | list | None = None) -> httpx.Response:
        async with self._lock:
            delay = self._next_allowed - time.monotonic()
            if delay > 0:
                await asyncio.sleep(delay)
            self._next_allowed = time.monotonic() + self._interval
        return await self._client.post(url, json=json)

    async def close(self) -> None:
        await self._client.aclose()
