"""Input-layer public API for key decoding and picker key handling."""

from .key_picker import PickerKeyHandler
from .key_registry import KeyComboBinding, KeyComboRegistry
from .reader import ESC_SEQUENCE_TIMEOUT_MS, read_key

__all__ = [
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "PickerKeyHandler",
    "read_key",
]
