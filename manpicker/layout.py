"""Pane geometry for the picker screen.

Two arrangements are supported: ``vertical`` puts results and prompt in the
left half with the preview on the right, ``horizontal`` stacks them in the top
half with the preview below. All rectangles use 0-based cell coordinates and
include the one-cell border drawn around each pane.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .ansi import display_width

VERTICAL = "vertical"
HORIZONTAL = "horizontal"
LAYOUT_NAMES: tuple[str, ...] = (VERTICAL, HORIZONTAL)
DEFAULT_LAYOUT = VERTICAL
PROMPT_HEIGHT = 3
MIN_DESCRIPTION_WIDTH = 4
MIN_COLUMNS = 8


def normalize_layout_name(name: str | None) -> str:
    """Return a valid layout name, falling back to the vertical split."""
    if not name:
        return DEFAULT_LAYOUT
    candidate = str(name).strip().lower()
    if candidate in LAYOUT_NAMES:
        return candidate
    return DEFAULT_LAYOUT


@dataclass(frozen=True)
class Rect:
    col: int
    row: int
    width: int
    height: int

    @property
    def inner_width(self) -> int:
        return max(0, self.width - 2)

    @property
    def inner_height(self) -> int:
        return max(0, self.height - 2)


@dataclass(frozen=True)
class PickerGeometry:
    results: Rect
    prompt: Rect
    preview: Rect

    @property
    def list_rows(self) -> int:
        """Rows available for result entries (always at least one)."""
        return max(1, self.results.inner_height)

    @property
    def preview_width(self) -> int:
        return max(1, self.preview.inner_width)


def compute_geometry(layout: str, columns: int, lines: int) -> PickerGeometry:
    """Split a ``columns`` x ``lines`` screen into the three picker panes."""
    columns = max(MIN_COLUMNS, columns)
    lines = max(PROMPT_HEIGHT * 3, lines)
    if normalize_layout_name(layout) == HORIZONTAL:
        top_height = lines // 2
        results_height = max(3, top_height - PROMPT_HEIGHT)
        return PickerGeometry(
            results=Rect(0, 0, columns, results_height),
            prompt=Rect(0, results_height, columns, PROMPT_HEIGHT),
            preview=Rect(0, results_height + PROMPT_HEIGHT, columns, lines - results_height - PROMPT_HEIGHT),
        )

    left_width = columns // 2
    results_height = lines - PROMPT_HEIGHT
    return PickerGeometry(
        results=Rect(0, 0, left_width, results_height),
        prompt=Rect(0, results_height, left_width, PROMPT_HEIGHT),
        preview=Rect(left_width, 0, columns - left_width, lines),
    )


def results_columns(visible_keys: Iterable[str], width: int) -> tuple[int, int]:
    """Return ``(key_len, description_len)`` for one results row.

    The key column is sized to the longest visible key. The description keeps
    at least ``MIN_DESCRIPTION_WIDTH`` columns and absorbs the rest.
    """
    width = max(0, width)
    max_len = min(max((display_width(key) for key in visible_keys), default=0), width)
    description_len = max(width - max_len - 1, MIN_DESCRIPTION_WIDTH)
    key_len = max(0, width - description_len)
    return key_len, description_len


__all__ = [
    "DEFAULT_LAYOUT",
    "HORIZONTAL",
    "LAYOUT_NAMES",
    "PROMPT_HEIGHT",
    "PickerGeometry",
    "Rect",
    "VERTICAL",
    "compute_geometry",
    "normalize_layout_name",
    "results_columns",
]
