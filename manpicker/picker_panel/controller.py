"""Query, selection, layout and preview operations over ``PickerState``.

The controller keeps the results list, the scroll window and the preview in
step with each other. Runtime wiring injects the fetch scheduler and the
page launcher so the logic stays deterministic and testable.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..layout import normalize_layout_name
from ..matching import ListEntry, filter_entries
from ..runtime.preview_fetch import PreviewFetchResult
from ..runtime.state import PREVIEW_EMPTY, PREVIEW_PENDING, PREVIEW_READY, PickerState
from ..sgr import escape_chars_to_styling


@dataclass(frozen=True)
class PickerDeps:
    """Runtime dependencies required by :class:`PickerOps`."""

    state: PickerState
    schedule_preview: Callable[[str, int], int]
    latest_preview_result: Callable[[], PreviewFetchResult | None]
    open_page: Callable[[str], str | None]
    save_layout: Callable[[str], None]


class PickerOps:
    """State-bound picker operations used by key handlers and the loop."""

    def __init__(self, deps: PickerDeps) -> None:
        self.state = deps.state
        self._schedule_preview = deps.schedule_preview
        self._latest_preview_result = deps.latest_preview_result
        self._open_page = deps.open_page
        self._save_layout = deps.save_layout

    def refresh_matches(self) -> None:
        """Rebuild result rows for the current query.

        The selection index is kept and only clamped when the list shrank.
        """
        state = self.state
        state.entries = filter_entries(state.query, state.pages)
        state.scroller.on_item_count_changed(len(state.entries))
        state.dirty = True

    def selected_entry(self) -> ListEntry | None:
        selection = self.state.scroller.selection
        if selection is None or not (0 <= selection < len(self.state.entries)):
            return None
        return self.state.entries[selection]

    def selected_key(self) -> str:
        """Return key of the selected page, or ``""`` when nothing matches."""
        entry = self.selected_entry()
        return entry.key if entry is not None else ""

    def move_selection(self, delta: int) -> bool:
        """Move selection with wraparound; returns whether it changed."""
        prev = self.state.scroller.selection
        self.state.scroller.move_by(delta)
        if self.state.scroller.selection == prev:
            return False
        self.state.dirty = True
        return True

    def append_query(self, text: str) -> None:
        self.state.query += text
        self.refresh_matches()

    def delete_query_char(self) -> bool:
        if not self.state.query:
            return False
        self.state.query = self.state.query[:-1]
        self.refresh_matches()
        return True

    def set_list_height(self, height: int) -> None:
        if self.state.scroller.set_height(height):
            self.state.dirty = True

    def set_layout(self, layout: str) -> bool:
        """Switch pane arrangement and persist it; returns whether it changed."""
        layout = normalize_layout_name(layout)
        if layout == self.state.layout:
            return False
        self.state.layout = layout
        self._save_layout(layout)
        self.state.dirty = True
        return True

    def request_preview(self, width: int) -> bool:
        """Ask for a preview of the selected page at ``width`` columns.

        Nothing is requested until the width is known or when the selected
        key and width match the preview already on screen or in flight.
        Returns whether a new request was issued.
        """
        state = self.state
        if width <= 0:
            return False
        key = self.selected_key()
        if key == state.preview_key and width == state.preview_width:
            return False
        state.preview_key = key
        state.preview_width = width
        state.dirty = True
        if not key:
            state.preview_request_id = 0
            state.preview_runs = []
            state.preview_status = PREVIEW_EMPTY
            return False
        state.preview_request_id = self._schedule_preview(key, width)
        state.preview_status = PREVIEW_PENDING
        return True

    def apply_preview_results(self) -> bool:
        """Install the newest finished preview; stale results are dropped."""
        state = self.state
        result = self._latest_preview_result()
        if result is None or result.request.request_id != state.preview_request_id:
            return False
        if result.text is None:
            state.preview_runs = []
            state.preview_status = PREVIEW_EMPTY
        else:
            state.preview_runs = escape_chars_to_styling(result.text)
            state.preview_status = PREVIEW_READY
        state.dirty = True
        return True

    def activate_selection(self) -> None:
        """Open the selected page full screen, reporting launch failures."""
        key = self.selected_key()
        if not key:
            return
        error = self._open_page(key)
        self.state.status_message = error or ""
        self.state.dirty = True
