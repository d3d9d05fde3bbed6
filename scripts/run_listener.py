"""Attach listeners for all vault events and publish normalized records until stopped.

Usage:
    VAULTWATCH_PROGRAM_ID=<program id> VAULTWATCH_EVENT_DECODER=mypkg.idl:decode_event \
        PYTHONPATH=src python scripts/run_listener.py
"""

import asyncio
import logging
import signal
import sys

from dependency_injector import providers

from vaultwatch.container import Container
from vaultwatch.listener import attach_vault_listeners, detach_listeners, load_decoder


async def main(container: Container) -> None:
    settings = container.settings()
    dispatcher = container.dispatcher()
    poller = container.poller()
    http_client = container.http_client()

    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    listener_ids = attach_vault_listeners(dispatcher, container.publisher())
    logging.info("All %d listeners attached to %s. Waiting for events...", len(listener_ids), settings.program_id)

    try:
        await poller.run(stop)
    finally:
        logging.info("Removing listeners...")
        detach_listeners(dispatcher, listener_ids)
        await http_client.close()
        logging.info("Listeners removed.")


if __name__ == "__main__":
    container = Container()
    settings = container.settings()

    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    if not settings.program_id or not settings.event_decoder:
        logging.error("VAULTWATCH_PROGRAM_ID and VAULTWATCH_EVENT_DECODER must be set")
        sys.exit(1)

    container.event_decoder.override(providers.Object(load_decoder(settings.event_decoder)))
    asyncio.run(main(container))
