"""Picker bootstrap: composes state, fetch worker, terminal and loop."""

from __future__ import annotations

import sys

from ..man_pages import ManPage, fetch_man_page, open_man_page
from ..picker_panel import PickerDeps, PickerOps
from ..ui_theme import resolve_theme
from .config import save_layout
from .loop import RuntimeLoopTiming, run_main_loop
from .preview_fetch import PreviewFetchScheduler
from .state import PickerState
from .terminal import TerminalController


def build_picker(pages: list[ManPage], layout: str, terminal: TerminalController) -> PickerOps:
    """Create picker state and operations bound to a live terminal."""
    state = PickerState(pages=list(pages), layout=layout)
    scheduler = PreviewFetchScheduler(fetch_man_page)

    def open_page(key: str) -> str | None:
        with terminal.released():
            return open_man_page(key)

    ops = PickerOps(
        PickerDeps(
            state=state,
            schedule_preview=scheduler.schedule,
            latest_preview_result=scheduler.latest_result,
            open_page=open_page,
            save_layout=save_layout,
        )
    )
    ops.refresh_matches()
    return ops


def run_picker(
    pages: list[ManPage],
    layout: str,
    theme_name: str | None = None,
    no_color: bool = False,
    query: str = "",
) -> None:
    """Run the interactive picker over ``pages`` on the controlling tty."""
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    ops = build_picker(pages, layout, terminal)
    if query:
        ops.append_query(query)
    run_main_loop(
        ops.state,
        terminal,
        stdin_fd,
        ops,
        resolve_theme(theme_name, no_color=no_color),
        RuntimeLoopTiming(),
    )
