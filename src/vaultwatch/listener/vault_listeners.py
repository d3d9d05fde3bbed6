"""Attach a publishing listener for every vault program event."""

import logging

from vaultwatch.domain.enums import VaultEvent
from vaultwatch.exceptions import ListenerNotFoundError
from vaultwatch.listener.dispatcher import EventDispatcher, EventHandler

logger = logging.getLogger(__name__)


def attach_vault_listeners(
    dispatcher: EventDispatcher,
    handler: EventHandler,
    events: list[VaultEvent] | None = None,
) -> list[int]:
    """Register ``handler`` for each vault event. Returns the listener ids."""
    listener_ids: list[int] = []
    for event in events or list(VaultEvent):
        logger.info("Attaching listener for: %s", event.value)
        listener_ids.append(dispatcher.add_event_listener(event.value, handler))
    return listener_ids


def detach_listeners(dispatcher: EventDispatcher, listener_ids: list[int]) -> None:
    """Remove listeners, logging (not raising) for ids that are already gone."""
    for listener_id in listener_ids:
        try:
            dispatcher.remove_event_listener(listener_id)
        except ListenerNotFoundError:
            logger.error("Failed to remove listener %d", listener_id)
