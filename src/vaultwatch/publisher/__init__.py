from vaultwatch.publisher.publisher import EventPublisher
from vaultwatch.publisher.record import build_record
from vaultwatch.publisher.sink import LoggingRecordSink, MemoryRecordSink, RecordSink

__all__ = ["EventPublisher", "LoggingRecordSink", "MemoryRecordSink", "RecordSink", "build_record"]
