"""EventPublisher — normalize a delivery and hand the record to a sink."""

import logging

from vaultwatch.domain.models import EventDelivery, EventRecord
from vaultwatch.normalizer import EventNormalizer
from vaultwatch.publisher.record import build_record
from vaultwatch.publisher.sink import RecordSink

logger = logging.getLogger(__name__)


class EventPublisher:
    """Best-effort publisher: a failing sink loses that one record, nothing more."""

    def __init__(self, normalizer: EventNormalizer, sink: RecordSink, source_id: str) -> None:
        self._normalizer = normalizer
        self._sink = sink
        self._source_id = source_id

    def publish(self, delivery: EventDelivery) -> EventRecord:
        record = build_record(delivery, self._source_id, self._normalizer)
        try:
            self._sink.emit(record)
        except Exception:
            logger.exception("Failed to emit %s record (slot %d)", delivery.event_name, delivery.slot)
        return record

    def __call__(self, delivery: EventDelivery) -> None:
        self.publish(delivery)
