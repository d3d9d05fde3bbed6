"""Solana JSON-RPC client — signatures and transactions for the watched program."""

import logging

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from vaultwatch.exceptions import ExternalServiceError
from vaultwatch.infra.http.rate_limited_client import RateLimitedClient

logger = logging.getLogger(__name__)


class SolanaRPCClient:
    """Minimal Solana JSON-RPC client for polling program activity."""

    def __init__(self, rpc_url: str, http_client: RateLimitedClient, commitment: str = "confirmed") -> None:
        self._rpc_url = rpc_url
        self._http = http_client
        self._commitment = commitment

    @retry(
        retry=retry_if_exception_type(ExternalServiceError),
        stop=stop_after_attempt(5),
        wait=wait_exponential(multiplier=2, min=3, max=30),
    )
    async def _call(self, method: str, params: list) -> dict | list | int | str | None:
        """Execute a JSON-RPC call and return the result field."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": method,
            "params": params,
        }
        try:
            resp = await self._http.post(self._rpc_url, json=payload)
        except httpx.HTTPError as exc:
            raise ExternalServiceError(f"Solana RPC transport error ({method}): {exc}") from exc
        data = resp.json()

        if "error" in data:
            error = data["error"]
            msg = error.get("message", str(error))
            raise ExternalServiceError(f"Solana RPC error ({method}): {msg}")

        return data.get("result")

    async def get_signatures(
        self,
        address: str,
        before: str | None = None,
        until: str | None = None,
        limit: int = 1000,
    ) -> list[dict]:
        """Fetch transaction signatures for an address, newest-first.

        ``before`` pages backwards; ``until`` stops at (excluding) a known signature.
        """
        opts: dict = {"limit": limit, "commitment": self._commitment}
        if before is not None:
            opts["before"] = before
        if until is not None:
            opts["until"] = until

        result = await self._call("getSignaturesForAddress", [address, opts])
        if result is None:
            return []
        return result  # type: ignore[return-value]

    async def get_transaction(self, signature: str) -> dict | None:
        """Fetch a transaction by signature; only ``meta.logMessages`` is needed downstream."""
        opts = {
            "encoding": "json",
            "commitment": self._commitment,
            "maxSupportedTransactionVersion": 0,
        }
        result = await self._call("getTransaction", [signature, opts])
        return result  # type: ignore[return-value]

