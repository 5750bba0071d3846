"""Scroll/selection state for a fixed-height list window."""

from __future__ import annotations

from dataclasses import dataclass

SINGLE_STEP = 1
PAGE_STEP = 10


@dataclass
class ViewportScroller:
    """Keep ``selection`` inside ``[offset, offset + height)``.

    ``offset`` is sticky: it only moves when the selection leaves the window,
    so it depends on its previous value as well as on the selection and
    height. With no items both ``selection`` and ``offset`` are ``None``.
    """

    height: int = 1
    count: int = 0
    selection: int | None = None
    offset: int | None = None

    def __post_init__(self) -> None:
        self.height = max(1, self.height)
        if self.count <= 0:
            self.count = 0
            self.selection = None
            self.offset = None
            return
        if self.selection is None:
            self.selection = 0
        if self.offset is None:
            self.offset = 0
        self.selection = max(0, min(self.selection, self.count - 1))
        self.recompute_offset()

    def move_by(self, delta: int) -> None:
        """Move selection by ``delta`` rows, wrapping at both ends."""
        if self.count == 0 or self.selection is None:
            return
        self.selection = (self.selection + delta) % self.count
        self.recompute_offset()

    def recompute_offset(self) -> None:
        """Pull ``offset`` just far enough to show the selection."""
        if self.selection is None:
            self.offset = None
            return
        offset = self.offset or 0
        if self.selection < offset:
            offset = self.selection
        elif self.selection > offset + self.height - 1:
            offset = self.selection - self.height + 1
        self.offset = offset

    def on_item_count_changed(self, count: int) -> None:
        """Clamp selection to a new item count and re-derive the offset."""
        self.count = max(0, count)
        if self.count == 0:
            self.selection = None
            self.offset = None
            return
        if self.selection is None:
            self.selection = 0
        elif self.selection >= self.count:
            self.selection = self.count - 1
        self.recompute_offset()

    def set_height(self, height: int) -> bool:
        """Apply a new window height; returns whether the offset moved."""
        previous = self.offset
        self.height = max(1, height)
        self.recompute_offset()
        return self.offset != previous

    def visible_range(self) -> range:
        """Indices of items inside the window (empty when there are none)."""
        if self.offset is None:
            return range(0)
        return range(self.offset, min(self.count, self.offset + self.height))


__all__ = ["PAGE_STEP", "SINGLE_STEP", "ViewportScroller"]
