"""SolanaEventPoller — at-least-once event feed over JSON-RPC polling."""

import asyncio
import contextlib
import logging

from vaultwatch.domain.models import EventDelivery
from vaultwatch.infra.solana.rpc_client import SolanaRPCClient
from vaultwatch.listener.decoder import EventDecoder
from vaultwatch.listener.dispatcher import EventDispatcher
from vaultwatch.listener.log_events import extract_program_data

logger = logging.getLogger(__name__)


class SolanaEventPoller:
    """Polls the program's signatures and dispatches decoded events oldest-first.

    The cursor (last processed signature) only advances after a transaction
    has been dispatched, so a failed cycle re-delivers rather than drops.
    """

    def __init__(
        self,
        rpc: SolanaRPCClient,
        program_id: str,
        decoder: EventDecoder,
        dispatcher: EventDispatcher,
        *,
        batch_limit: int = 1000,
        poll_interval: float = 2.0,
        start_signature: str | None = None,
    ) -> None:
        self._rpc = rpc
        self._program_id = program_id
        self._decoder = decoder
        self._dispatcher = dispatcher
        self._batch_limit = batch_limit
        self._poll_interval = poll_interval
        self._last_signature = start_signature
        self._primed = start_signature is not None

    @property
    def last_signature(self) -> str | None:
        return self._last_signature

    async def prime(self) -> None:
        """Start from the program's newest signature so only new events are delivered."""
        newest = await self._rpc.get_signatures(self._program_id, limit=1)
        self._last_signature = newest[0]["signature"] if newest else None
        self._primed = True
        logger.info("Polling %s from signature %s", self._program_id, self._last_signature)

    async def poll_once(self) -> int:
        """Process all signatures newer than the cursor. Returns count of dispatched events."""
        if not self._primed:
            await self.prime()
            return 0

        sigs = await self._fetch_new_signatures()
        dispatched = 0

        # Oldest first
        for sig_info in reversed(sigs):
            signature = sig_info["signature"]
            if sig_info.get("err") is None:
                tx_data = await self._rpc.get_transaction(signature)
                if tx_data is not None:
                    slot = sig_info.get("slot") or tx_data.get("slot", 0)
                    dispatched += await self._dispatch_transaction(signature, slot, tx_data)
            self._last_signature = signature

        return dispatched

    async def run(self, stop_event: asyncio.Event) -> None:
        """Poll until ``stop_event`` is set. Failed cycles are logged and retried next tick."""
        while not stop_event.is_set():
            try:
                count = await self.poll_once()
                if count:
                    logger.info("Dispatched %d events from %s", count, self._program_id)
            except Exception:
                logger.exception("Poll cycle failed for %s", self._program_id)

            with contextlib.suppress(TimeoutError):
                await asyncio.wait_for(stop_event.wait(), timeout=self._poll_interval)

    async def _fetch_new_signatures(self) -> list[dict]:
        """Signatures newer than the cursor, newest-first, following ``before`` pages."""
        collected: list[dict] = []
        before: str | None = None

        while True:
            batch = await self._rpc.get_signatures(
                self._program_id,
                before=before,
                until=self._last_signature,
                limit=self._batch_limit,
            )
            collected.extend(batch)
            if len(batch) < self._batch_limit:
                break
            before = batch[-1]["signature"]

        return collected

    async def _dispatch_transaction(self, signature: str, slot: int, tx_data: dict) -> int:
        meta = tx_data.get("meta") or {}
        log_messages = meta.get("logMessages") or []
        dispatched = 0

        for payload in extract_program_data(log_messages, self._program_id):
            try:
                decoded = self._decoder(payload)
            except Exception:
                logger.exception("Failed to decode event payload in %s", signature)
                continue
            if decoded is None:
                continue

            event_name, data = decoded
            await self._dispatcher.dispatch(
                EventDelivery(event_name=event_name, data=data, slot=slot, signature=signature)
            )
            dispatched += 1

        return dispatched
