from enum import Enum


class FieldKind(str, Enum):
    """How a struct field is treated by the normalizer, decided by its name."""

    DECIMAL = "decimal"
    SUPPRESSED = "suppressed"
    ORDINARY = "ordinary"
