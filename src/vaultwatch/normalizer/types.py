"""Value types shared by the normalizer modules."""

from typing import Any, Literal, Protocol

from pydantic import BaseModel

# JSON-representable output of the normalizer.
NormalizedValue = Any


class DiagnosticReporter(Protocol):
    """Sink for normalization diagnostics. A ``logging.Logger`` satisfies it."""

    def warning(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...


class DecimalNumber(BaseModel):
    """Fixed-point value that fits a float without loss."""

    kind: Literal["number"] = "number"
    value: float


class DecimalFallback(BaseModel):
    """Fixed-point value that did not fit a float exactly.

    ``exact`` always holds the full decimal string; ``value`` is what gets
    emitted, which depends on the overflow policy (the string, or None).
    """

    kind: Literal["fallback"] = "fallback"
    exact: str
    value: str | None


DecimalOrFallback = DecimalNumber | DecimalFallback
