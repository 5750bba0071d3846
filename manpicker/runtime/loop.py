"""Main interactive event loop for the picker.

Each iteration re-derives pane geometry from the terminal size, keeps the
scroll window and the preview request in step with it, installs finished
preview fetches, renders when something changed, and dispatches one key.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass

from ..input import PickerKeyHandler, read_key
from ..layout import compute_geometry
from ..picker_panel import PickerOps
from ..render import RenderContext, render_frame
from ..ui_theme import UITheme
from .state import PickerState
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 50


def _normalize_enter(state: PickerState, key: str) -> str | None:
    """Fold CR/LF variants into ``ENTER``; ``None`` means drop the key."""
    if state.skip_next_lf and key == "ENTER_LF":
        state.skip_next_lf = False
        return None
    if key == "ENTER_CR":
        state.skip_next_lf = True
        return "ENTER"
    state.skip_next_lf = False
    if key == "ENTER_LF":
        return "ENTER"
    return key


def run_main_loop(
    state: PickerState,
    terminal: TerminalController,
    stdin_fd: int,
    ops: PickerOps,
    theme: UITheme,
    timing: RuntimeLoopTiming | None = None,
) -> None:
    """Run the picker until a quit key is pressed."""
    timing = timing or RuntimeLoopTiming()
    key_handler = PickerKeyHandler(ops)
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != last_size:
                last_size = (term.columns, term.lines)
                state.dirty = True
            geometry = compute_geometry(state.layout, term.columns, term.lines)
            ops.set_list_height(geometry.list_rows)
            ops.request_preview(geometry.preview_width)
            ops.apply_preview_results()

            if state.dirty:
                render_frame(
                    RenderContext(
                        geometry=geometry,
                        columns=term.columns,
                        lines=term.lines,
                        theme=theme,
                        entries=state.entries,
                        scroller=state.scroller,
                        query=state.query,
                        total_pages=len(state.pages),
                        preview_runs=state.preview_runs,
                        preview_status=state.preview_status,
                        status_message=state.status_message,
                    )
                )
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            except KeyboardInterrupt:
                break
            if key == "":
                continue
            normalized = _normalize_enter(state, key)
            if normalized is None:
                continue
            if key_handler.handle_key(normalized):
                break
