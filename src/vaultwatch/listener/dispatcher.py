"""EventDispatcher — per-event-name listener registry."""

import inspect
import itertools
import logging
from collections.abc import Awaitable, Callable

from vaultwatch.domain.models import EventDelivery
from vaultwatch.exceptions import ListenerNotFoundError

logger = logging.getLogger(__name__)

EventHandler = Callable[[EventDelivery], Awaitable[None] | None]


class EventDispatcher:
    """Routes deliveries to the handlers registered for their event name.

    Handlers may be plain callables or coroutine functions. A failing handler
    is logged and does not prevent the remaining handlers from running.
    """

    def __init__(self) -> None:
        self._listeners: dict[int, tuple[str, EventHandler]] = {}
        self._ids = itertools.count()

    def add_event_listener(self, event_name: str, handler: EventHandler) -> int:
        listener_id = next(self._ids)
        self._listeners[listener_id] = (event_name, handler)
        return listener_id

    def remove_event_listener(self, listener_id: int) -> None:
        if self._listeners.pop(listener_id, None) is None:
            raise ListenerNotFoundError(f"Event listener {listener_id} not found")

    def listener_count(self, event_name: str | None = None) -> int:
        if event_name is None:
            return len(self._listeners)
        return sum(1 for name, _ in self._listeners.values() if name == event_name)

    async def dispatch(self, delivery: EventDelivery) -> int:
        """Invoke every handler for ``delivery.event_name``. Returns how many ran successfully."""
        handlers = [h for name, h in list(self._listeners.values()) if name == delivery.event_name]
        if not handlers:
            logger.debug("No listener for %s (slot %d)", delivery.event_name, delivery.slot)
            return 0

        ok = 0
        for handler in handlers:
            try:
                result = handler(delivery)
                if inspect.isawaitable(result):
                    await result
                ok += 1
            except Exception:
                logger.exception("Listener for %s failed (slot %d)", delivery.event_name, delivery.slot)
        return ok
