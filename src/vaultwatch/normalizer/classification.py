"""Name-based field classification: which fields are decimals, which are hidden."""

from collections.abc import Iterable, Mapping

from vaultwatch.domain.enums import FieldKind, VaultEvent

SUPPRESSED_PREFIXES: tuple[str, ...] = ("padding", "_padding", "reserved", "_reserved")

# u128 fields holding fixed-point values with 48 fractional bits.
DECIMAL_U128_FIELDS: frozenset[str] = frozenset({
    "vaultHighestAssetPerLpDecimalBitsBefore",
    "vaultHighestAssetPerLpDecimalBitsAfter",
    "amountAssetToWithdrawDecimalBits",
})


def classify_field(
    name: str,
    decimal_field_names: Iterable[str],
    suppressed_prefixes: tuple[str, ...] = SUPPRESSED_PREFIXES,
) -> FieldKind:
    """Classify a struct field by name. Suppression wins over decimal membership."""
    if name.startswith(suppressed_prefixes):
        return FieldKind.SUPPRESSED
    if name in decimal_field_names:
        return FieldKind.DECIMAL
    return FieldKind.ORDINARY


class FieldPolicy:
    """Table of event schema → decimal field names, plus the suppressed prefixes.

    Event names not in the table fall back to ``default_decimal_fields``.
    """

    def __init__(
        self,
        decimal_fields_by_event: Mapping[str, Iterable[str]] | None = None,
        default_decimal_fields: Iterable[str] = DECIMAL_U128_FIELDS,
        suppressed_prefixes: tuple[str, ...] = SUPPRESSED_PREFIXES,
    ) -> None:
        self._by_event: dict[str, frozenset[str]] = {
            name: frozenset(fields) for name, fields in (decimal_fields_by_event or {}).items()
        }
        self._default: frozenset[str] = frozenset(default_decimal_fields)
        self.suppressed_prefixes = tuple(suppressed_prefixes)

    def decimal_fields(self, event_name: str) -> frozenset[str]:
        return self._by_event.get(event_name, self._default)

    def register(self, event_name: str, decimal_fields: Iterable[str]) -> None:
        self._by_event[event_name] = frozenset(decimal_fields)

    def known_events(self) -> list[str]:
        return sorted(self._by_event)


def build_vault_field_policy() -> FieldPolicy:
    """FieldPolicy for every vault program event (they all share one decimal set)."""
    return FieldPolicy({event.value: DECIMAL_U128_FIELDS for event in VaultEvent})
