from enum import Enum


class OverflowPolicy(str, Enum):
    """What a fixed-point decode emits when the value does not fit a float exactly."""

    FALLBACK_STRING = "fallback_string"  # exact decimal string
    SENTINEL = "sentinel"  # null
