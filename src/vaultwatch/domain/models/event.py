"""Event delivery and output record models."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EventDelivery(BaseModel):
    """A decoded event as handed over by the subscription layer."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    event_name: str
    data: Any  # decoded, not yet normalized
    slot: int
    signature: str | None = None


def _string_fallback(value: Any) -> str:
    """Values pydantic cannot serialize still yield a record."""
    return str(value)


class EventRecord(BaseModel):
    """One normalized, log-safe record per delivered event."""

    model_config = ConfigDict(populate_by_name=True, ser_json_bytes="hex")

    timestamp: datetime  # generation time, not event time
    source_id: str = Field(alias="sourceId")
    event_name: str = Field(alias="eventName")
    slot: int
    signature: str | None = None
    event_data: Any = Field(alias="eventData")

    def to_json(self) -> str:
        """Serialize with wire field names; ``signature`` is omitted when absent."""
        exclude = {"signature"} if self.signature is None else None
        return self.model_dump_json(by_alias=True, exclude=exclude, fallback=_string_fallback)

    def to_log_dict(self) -> dict[str, Any]:
        exclude = {"signature"} if self.signature is None else None
        return self.model_dump(mode="json", by_alias=True, exclude=exclude, fallback=_string_fallback)
