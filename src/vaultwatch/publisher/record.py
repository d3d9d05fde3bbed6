"""Build output records from deliveries."""

from datetime import UTC, datetime

from vaultwatch.domain.models import EventDelivery, EventRecord
from vaultwatch.normalizer import EventNormalizer


def build_record(delivery: EventDelivery, source_id: str, normalizer: EventNormalizer) -> EventRecord:
    """Normalize the delivered payload and attach delivery metadata."""
    return EventRecord(
        timestamp=datetime.now(UTC),
        source_id=source_id,
        event_name=delivery.event_name,
        slot=delivery.slot,
        signature=delivery.signature,
        event_data=normalizer.normalize_event(delivery.event_name, delivery.data),
    )
