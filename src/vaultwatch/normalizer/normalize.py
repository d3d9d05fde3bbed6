"""Recursive normalization of decoded event payloads into JSON-safe trees."""

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

import base58
from solders.pubkey import Pubkey

from vaultwatch.domain.enums import FieldKind, OverflowPolicy
from vaultwatch.exceptions import SchemaMismatchError
from vaultwatch.normalizer.classification import DECIMAL_U128_FIELDS, FieldPolicy, classify_field
from vaultwatch.normalizer.fixed_point import DECIMAL_FRACTIONAL_BITS, decode_fixed_point, format_decimal
from vaultwatch.normalizer.types import DiagnosticReporter, NormalizedValue

logger = logging.getLogger(__name__)

# Largest integer a float64 (and therefore a JSON consumer in JS) holds exactly.
MAX_SAFE_INTEGER = 2**53 - 1
PUBKEY_LENGTH = 32


def _is_big_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class EventNormalizer:
    """Turns decoded event trees into plain JSON-representable values.

    Stateless between calls: the field policy, overflow policy and reporter
    are fixed at construction, so one instance can serve concurrent events.
    """

    def __init__(
        self,
        field_policy: FieldPolicy | None = None,
        *,
        overflow_policy: OverflowPolicy = OverflowPolicy.FALLBACK_STRING,
        strict: bool = False,
        reporter: DiagnosticReporter = logger,
    ) -> None:
        self._field_policy = field_policy or FieldPolicy()
        self._overflow_policy = overflow_policy
        self._strict = strict
        self._reporter = reporter

    def normalize_event(self, event_name: str, data: Any) -> NormalizedValue:
        """Normalize an event payload using the decimal fields of its schema."""
        return self.normalize(data, self._field_policy.decimal_fields(event_name))

    def normalize(self, value: Any, decimal_field_names: frozenset[str]) -> NormalizedValue:
        match value:
            case None:
                return None
            case Pubkey():
                return str(value)
            case bytes() if len(value) == PUBKEY_LENGTH:
                return base58.b58encode(value).decode("ascii")
            case bytes() | bytearray():
                # Borsh ``bytes`` fields: 0x-prefixed lowercase hex
                return "0x" + bytes(value).hex()
            case bool() | str() | float():
                return value
            case int():
                return self._coerce_int(value)
            case Decimal():
                # Safe range of an arbitrary-precision literal is unknown here.
                return format_decimal(value)
            case list() | tuple():
                return [self.normalize(item, decimal_field_names) for item in value]
            case Mapping():
                return self._normalize_fields(value.items(), decimal_field_names)
            case _ if dataclasses.is_dataclass(value) and not isinstance(value, type):
                fields = ((f.name, getattr(value, f.name)) for f in dataclasses.fields(value))
                return self._normalize_fields(fields, decimal_field_names)
            case _:
                self._reporter.debug("Passing through value of unrecognised type %s", type(value).__name__)
                return value

    def _normalize_fields(
        self,
        fields: Iterable[tuple[Any, Any]],
        decimal_field_names: frozenset[str],
    ) -> dict[str, NormalizedValue]:
        result: dict[str, NormalizedValue] = {}
        for key, item in fields:
            name = str(key)
            kind = classify_field(name, decimal_field_names, self._field_policy.suppressed_prefixes)

            if kind is FieldKind.SUPPRESSED:
                continue
            if kind is FieldKind.DECIMAL:
                if _is_big_integer(item):
                    result[name] = decode_fixed_point(
                        item,
                        DECIMAL_FRACTIONAL_BITS,
                        policy=self._overflow_policy,
                        reporter=self._reporter,
                    ).value
                    continue
                self._check_decimal_mismatch(name, item)
            result[name] = self.normalize(item, decimal_field_names)
        return result

    def _check_decimal_mismatch(self, name: str, item: Any) -> None:
        # Already-normalized decimals (float, fallback string, sentinel) are fine.
        if item is None or isinstance(item, (float, str)):
            return
        if self._strict:
            raise SchemaMismatchError(name, item)
        self._reporter.warning(
            "Decimal field %s holds %s instead of an integer; passing through",
            name,
            type(item).__name__,
        )

    def _coerce_int(self, value: int) -> int | str:
        if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
            return value
        self._reporter.warning("Integer %d exceeds the safe integer range; emitting as string", value)
        return str(value)


def normalize(
    value: Any,
    decimal_field_names: Iterable[str] = DECIMAL_U128_FIELDS,
    *,
    overflow_policy: OverflowPolicy = OverflowPolicy.FALLBACK_STRING,
    strict: bool = False,
    reporter: DiagnosticReporter = logger,
) -> NormalizedValue:
    """Normalize one decoded value tree with an explicit decimal-field set."""
    fields = frozenset(decimal_field_names)
    normalizer = EventNormalizer(
        FieldPolicy(default_decimal_fields=fields),
        overflow_policy=overflow_policy,
        strict=strict,
        reporter=reporter,
    )
    return normalizer.normalize(value, fields)
