"""Record sinks. Transport (files, shippers) is left to logging handlers."""

import logging
from typing import Protocol

from vaultwatch.domain.models import EventRecord

EVENTS_LOGGER = "vaultwatch.events"


class RecordSink(Protocol):
    def emit(self, record: EventRecord) -> None: ...


class LoggingRecordSink:
    """Writes each record as one JSON line to the ``vaultwatch.events`` logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger or logging.getLogger(EVENTS_LOGGER)
        self._level = level

    def emit(self, record: EventRecord) -> None:
        self._logger.log(self._level, "%s", record.to_json())


class MemoryRecordSink:
    """Keeps records in a list. Used by tests and dry runs."""

    def __init__(self) -> None:
        self.records: list[EventRecord] = []

    def emit(self, record: EventRecord) -> None:
        self.records.append(record)
