from vaultwatch.normalizer.classification import (
    DECIMAL_U128_FIELDS,
    SUPPRESSED_PREFIXES,
    FieldPolicy,
    build_vault_field_policy,
    classify_field,
)
from vaultwatch.normalizer.fixed_point import DECIMAL_FRACTIONAL_BITS, decode_fixed_point
from vaultwatch.normalizer.normalize import MAX_SAFE_INTEGER, EventNormalizer, normalize
from vaultwatch.normalizer.types import DecimalFallback, DecimalNumber, DecimalOrFallback

__all__ = [
    "DECIMAL_FRACTIONAL_BITS",
    "DECIMAL_U128_FIELDS",
    "MAX_SAFE_INTEGER",
    "SUPPRESSED_PREFIXES",
    "DecimalFallback",
    "DecimalNumber",
    "DecimalOrFallback",
    "EventNormalizer",
    "FieldPolicy",
    "build_vault_field_policy",
    "classify_field",
    "decode_fixed_point",
    "normalize",
]
