"""Event decoder contract. Decoding against the program IDL happens outside vaultwatch."""

import importlib
from collections.abc import Callable
from typing import Any

# Anchor event payload bytes -> (event name, decoded tree), or None if not an event.
EventDecoder = Callable[[bytes], tuple[str, Any] | None]


def load_decoder(path: str) -> EventDecoder:
    """Resolve a ``package.module:attribute`` path to a decoder callable."""
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ValueError(f"Decoder path must look like 'package.module:callable', got {path!r}")

    module = importlib.import_module(module_name)
    decoder = getattr(module, attr)
    if not callable(decoder):
        raise TypeError(f"{path} is not callable")
    return decoder
