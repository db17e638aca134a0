"""Input-layer public API for key decoding and key tables.

Mode handlers live in ``lazydig.input.keys`` and are imported from there so
that the screen areas can use ``KeyMap`` without import cycles.
"""

from .key_registry import KeyBinding, KeyMap
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "UNKNOWN_KEY",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyBinding",
    "KeyMap",
]
