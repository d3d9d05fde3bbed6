from vaultwatch.domain.models.event import EventDelivery, EventRecord

__all__ = ["EventDelivery", "EventRecord"]
