"""Picker keyboard handling.

Navigation keys move the selection with wraparound, printable characters
edit the query, and Alt+V / Alt+H switch the pane arrangement.
"""

from __future__ import annotations

from ..layout import HORIZONTAL, VERTICAL
from ..picker_panel import PickerOps
from ..viewport import PAGE_STEP, SINGLE_STEP
from .key_registry import KeyComboBinding, KeyComboRegistry

QUIT_KEYS: tuple[str, ...] = ("ESC", "CTRL_C")


class PickerKeyHandler:
    """Translate key tokens into picker operations."""

    def __init__(self, ops: PickerOps) -> None:
        self.ops = ops
        self.registry = KeyComboRegistry().register_bindings(
            KeyComboBinding(QUIT_KEYS, lambda: True),
            KeyComboBinding(("UP", "CTRL_P"), lambda: self._move(-SINGLE_STEP)),
            KeyComboBinding(("DOWN", "CTRL_N"), lambda: self._move(SINGLE_STEP)),
            KeyComboBinding(("CTRL_U", "PAGE_UP"), lambda: self._move(-PAGE_STEP)),
            KeyComboBinding(("CTRL_D", "PAGE_DOWN"), lambda: self._move(PAGE_STEP)),
            KeyComboBinding(("ENTER",), self._activate),
            KeyComboBinding(("BACKSPACE",), self._delete_char),
            KeyComboBinding(("ALT_V", "ALT_v"), lambda: self._set_layout(VERTICAL)),
            KeyComboBinding(("ALT_H", "ALT_h"), lambda: self._set_layout(HORIZONTAL)),
        )

    def _move(self, delta: int) -> bool:
        self.ops.move_selection(delta)
        return False

    def _activate(self) -> bool:
        self.ops.activate_selection()
        return False

    def _delete_char(self) -> bool:
        self.ops.delete_query_char()
        return False

    def _set_layout(self, layout: str) -> bool:
        self.ops.set_layout(layout)
        return False

    def handle_key(self, key: str) -> bool:
        """Handle one key token; returns whether the picker should quit."""
        if key in self.registry:
            return bool(self.registry.dispatch(key))
        if len(key) == 1 and key.isprintable():
            self.ops.append_query(key)
        return False
