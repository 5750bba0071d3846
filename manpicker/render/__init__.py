"""Rendering engine for the picker screen.

Defines render context data and writes fully composed ANSI frames.
Pane bodies are built by pure helpers so they can be checked without a tty.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from ..ansi import clip_text, display_width
from ..layout import PickerGeometry, Rect, results_columns
from ..matching import ListEntry
from ..runtime.state import PREVIEW_EMPTY, PREVIEW_PENDING
from ..sgr import StyledRun, runs_to_lines
from ..ui_theme import UITheme
from ..viewport import ViewportScroller
from .boxes import box_rows

PROMPT_MARKER = ">"
PREVIEW_LOADING_TEXT = "Loading…"
PREVIEW_EMPTY_TEXT = "No preview available"


@dataclass
class RenderContext:
    geometry: PickerGeometry
    columns: int
    lines: int
    theme: UITheme
    entries: list[ListEntry]
    scroller: ViewportScroller
    query: str
    total_pages: int
    preview_runs: list[StyledRun]
    preview_status: str
    status_message: str = ""


def _segment(text: str, style: str, theme: UITheme, base: str = "") -> str:
    """Paint ``text`` with ``style`` on top of an optional ``base`` background."""
    if not text:
        return ""
    if not style and not base:
        return text
    return f"{base}{style}{text}{theme.reset}"


def _fill(width: int, theme: UITheme, base: str = "") -> str:
    return _segment(" " * width, "", theme, base) if width > 0 else ""


def result_row(entry: ListEntry, key_len: int, description_len: int, selected: bool, theme: UITheme) -> str:
    """One results row: key column, then highlighted description spans."""
    base = theme.selected_row if selected else ""
    key_text, key_used = clip_text(entry.key, key_len)
    out = [_segment(key_text, theme.result_key, theme, base), _fill(key_len - key_used, theme, base)]
    used = 0
    for span in entry.spans:
        if used >= description_len:
            break
        text, width = clip_text(span.text, description_len - used, start_col=used)
        style = theme.match_highlight if span.highlighted else ""
        out.append(_segment(text, style, theme, base))
        used += width
    out.append(_fill(description_len - used, theme, base))
    return "".join(out)


def results_body(entries: Sequence[ListEntry], scroller: ViewportScroller, width: int, theme: UITheme) -> list[str]:
    """Visible results rows padded to ``width`` columns."""
    visible = [entries[idx] for idx in scroller.visible_range() if idx < len(entries)]
    key_len, description_len = results_columns((entry.key for entry in visible), width)
    description_len = min(description_len, width)
    rows: list[str] = []
    for offset, entry in enumerate(visible):
        idx = (scroller.offset or 0) + offset
        rows.append(result_row(entry, key_len, description_len, idx == scroller.selection, theme))
    return rows


def prompt_body(query: str, matched: int, total: int, width: int, theme: UITheme) -> str:
    """Prompt row: marker, query field and ``matched/total`` counter."""
    counter = f" {matched}/{total}"
    counter_width = display_width(counter)
    marker_width = display_width(PROMPT_MARKER)
    field_width = width - marker_width - counter_width
    if field_width <= 0:
        text, used = clip_text(query, width)
        return text + " " * (width - used)

    visible_query = query
    while visible_query and display_width(visible_query) > field_width:
        visible_query = visible_query[1:]
    query_text, query_used = clip_text(visible_query, field_width)
    return "".join(
        (
            _segment(PROMPT_MARKER, theme.prompt_marker, theme),
            _segment(query_text, "", theme, theme.prompt_input),
            _fill(field_width - query_used, theme, theme.prompt_input),
            _segment(counter, theme.match_count, theme),
        )
    )


def _run_style(run: StyledRun, theme: UITheme) -> str:
    return (theme.bold if run.bold else "") + (theme.underline if run.underline else "")


def preview_body(runs: list[StyledRun], status: str, width: int, height: int, theme: UITheme) -> list[str]:
    """Top ``height`` preview lines clipped and padded to ``width`` columns."""
    if not runs:
        if status == PREVIEW_PENDING:
            message = PREVIEW_LOADING_TEXT
        elif status == PREVIEW_EMPTY:
            message = PREVIEW_EMPTY_TEXT
        else:
            message = ""
        text, used = clip_text(message, width)
        return [_segment(text, theme.status_dim, theme) + " " * (width - used)]

    rows: list[str] = []
    for line_runs in runs_to_lines(runs)[:height]:
        out: list[str] = []
        used = 0
        for run in line_runs:
            if used >= width:
                break
            text, run_width = clip_text(run.text, width - used, start_col=used)
            out.append(_segment(text, _run_style(run, theme), theme))
            used += run_width
        out.append(" " * (width - used))
        rows.append("".join(out))
    return rows


def _pane(rect: Rect, title: str, body: list[str], theme: UITheme, footer: str = "") -> list[tuple[int, int, str]]:
    rows = box_rows(rect.width, rect.height, title, body, theme, footer)
    return [(rect.row + idx, rect.col, row) for idx, row in enumerate(rows)]


def build_frame(context: RenderContext) -> str:
    """Compose one full-screen ANSI frame for ``context``."""
    geometry = context.geometry
    theme = context.theme
    placed: list[tuple[int, int, str]] = []
    placed.extend(
        _pane(
            geometry.results,
            "Results",
            results_body(context.entries, context.scroller, geometry.results.inner_width, theme),
            theme,
        )
    )
    placed.extend(
        _pane(
            geometry.prompt,
            "Prompt",
            [
                prompt_body(
                    context.query,
                    len(context.entries),
                    context.total_pages,
                    geometry.prompt.inner_width,
                    theme,
                )
            ],
            theme,
            footer=context.status_message,
        )
    )
    placed.extend(
        _pane(
            geometry.preview,
            "Preview",
            preview_body(
                context.preview_runs,
                context.preview_status,
                geometry.preview.inner_width,
                geometry.preview.inner_height,
                theme,
            ),
            theme,
        )
    )

    out: list[str] = ["\033[H\033[J"]
    for row, col, text in placed:
        if row >= context.lines or col >= context.columns:
            continue
        out.append(f"\033[{row + 1};{col + 1}H{text}")
    out.append(theme.reset)
    return "".join(out)


def render_frame(context: RenderContext) -> None:
    """Write the frame for ``context`` to stdout in one write."""
    os.write(sys.stdout.fileno(), build_frame(context).encode("utf-8", errors="replace"))


__all__ = [
    "RenderContext",
    "build_frame",
    "preview_body",
    "prompt_body",
    "render_frame",
    "result_row",
    "results_body",
]
