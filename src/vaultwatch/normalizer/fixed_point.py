"""Fixed-point decimal decoding for ``*DecimalBits`` fields."""

import logging
import math
from decimal import Decimal, localcontext

from vaultwatch.domain.enums import OverflowPolicy
from vaultwatch.normalizer.types import DecimalFallback, DecimalNumber, DecimalOrFallback, DiagnosticReporter

logger = logging.getLogger(__name__)

# The vault program stores these values with 6 fractional bytes.
DECIMAL_FRACTIONAL_BYTES = 6
DECIMAL_FRACTIONAL_BITS = 8 * DECIMAL_FRACTIONAL_BYTES


def fixed_point_to_decimal(bits: int, fractional_bits: int = DECIMAL_FRACTIONAL_BITS) -> Decimal:
    """Exact ``bits / 2**fractional_bits``.

    A dyadic fraction with n fractional bits has at most n decimal fraction
    digits, so the context precision below keeps the division exact.
    """
    divisor = 2**fractional_bits
    with localcontext() as ctx:
        ctx.prec = len(str(abs(bits))) + len(str(divisor)) + fractional_bits + 2
        return Decimal(bits) / Decimal(divisor)


def format_decimal(value: Decimal) -> str:
    """Plain (non-exponent) decimal string without trailing fraction zeros."""
    text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def decode_fixed_point(
    bits: int,
    fractional_bits: int = DECIMAL_FRACTIONAL_BITS,
    *,
    policy: OverflowPolicy = OverflowPolicy.FALLBACK_STRING,
    reporter: DiagnosticReporter = logger,
) -> DecimalOrFallback:
    """Decode a fixed-point integer into a float, or a fallback when a float would lose data."""
    exact = fixed_point_to_decimal(bits, fractional_bits)
    as_float = float(exact)

    if not math.isinf(as_float) and Decimal(as_float) == exact:
        return DecimalNumber(value=as_float)

    exact_str = format_decimal(exact)
    # Magnitude overflow is unusual; precision-only fallbacks are routine for large amounts.
    report = reporter.warning if math.isinf(as_float) else reporter.debug
    report(
        "Fixed-point value %d / 2^%d = %s is not exactly representable as float; using %s",
        bits,
        fractional_bits,
        exact_str,
        policy.value,
    )
    if policy is OverflowPolicy.SENTINEL:
        return DecimalFallback(exact=exact_str, value=None)
    return DecimalFallback(exact=exact_str, value=exact_str)
