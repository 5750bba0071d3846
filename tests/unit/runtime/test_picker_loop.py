"""Tests for the interactive loop orchestration."""

from __future__ import annotations

import contextlib
import os
import unittest
from unittest import mock

from manpicker.man_pages import ManPage
from manpicker.picker_panel import PickerDeps, PickerOps
from manpicker.runtime.loop import RuntimeLoopTiming, _normalize_enter, run_main_loop
from manpicker.runtime.state import PickerState
from manpicker.ui_theme import PLAIN_THEME


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextlib.contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


def _make_ops() -> tuple[PickerOps, list[tuple[str, int]], list[str]]:
    scheduled: list[tuple[str, int]] = []
    opened: list[str] = []
    state = PickerState(pages=[ManPage("ls", "list directory contents"), ManPage("cp", "copy files")])

    def schedule(key: str, width: int) -> int:
        scheduled.append((key, width))
        return len(scheduled)

    def open_page(key: str) -> str | None:
        opened.append(key)
        return None

    ops = PickerOps(
        PickerDeps(
            state=state,
            schedule_preview=schedule,
            latest_preview_result=lambda: None,
            open_page=open_page,
            save_layout=lambda _layout: None,
        )
    )
    ops.refresh_matches()
    return ops, scheduled, opened


def _run(ops: PickerOps, keys: list[str], size=os.terminal_size((100, 30))):
    terminal = _FakeTerminal()
    frames: list = []
    with (
        mock.patch("manpicker.runtime.loop.read_key", side_effect=keys),
        mock.patch("manpicker.runtime.loop.render_frame", side_effect=frames.append),
        mock.patch("manpicker.runtime.loop.shutil.get_terminal_size", return_value=size),
    ):
        run_main_loop(ops.state, terminal, 0, ops, PLAIN_THEME, RuntimeLoopTiming(key_poll_ms=1))
    return terminal, frames


class RunMainLoopTests(unittest.TestCase):
    def test_quit_restores_terminal(self) -> None:
        ops, _, _ = _make_ops()
        terminal, frames = _run(ops, ["ESC"])
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertEqual(len(frames), 1)

    def test_preview_requested_at_pane_width(self) -> None:
        ops, scheduled, _ = _make_ops()
        _run(ops, ["", "DOWN", "CTRL_C"])
        self.assertEqual(scheduled, [("ls", 48), ("cp", 48)])

    def test_idle_iterations_do_not_redraw(self) -> None:
        ops, _, _ = _make_ops()
        _, frames = _run(ops, ["", "", "ESC"])
        self.assertEqual(len(frames), 1)

    def test_typing_redraws_with_query(self) -> None:
        ops, _, _ = _make_ops()
        _, frames = _run(ops, ["p", "y", "ESC"])
        self.assertEqual(frames[-1].query, "py")
        self.assertEqual([entry.key for entry in frames[-1].entries], ["cp"])
        self.assertEqual(frames[-1].geometry.list_rows, 25)

    def test_unbound_key_sequence_does_not_quit(self) -> None:
        ops, _, _ = _make_ops()
        _, frames = _run(ops, ["UNKNOWN", "p", "ESC"])
        self.assertEqual(frames[-1].query, "p")

    def test_crlf_enter_activates_once(self) -> None:
        ops, _, opened = _make_ops()
        _run(ops, ["ENTER_CR", "ENTER_LF", "ENTER_LF", "ESC"])
        self.assertEqual(opened, ["ls", "ls"])

    def test_keyboard_interrupt_exits_loop(self) -> None:
        ops, _, _ = _make_ops()
        terminal, _ = _run(ops, [KeyboardInterrupt()])
        self.assertEqual(terminal.exited, 1)


class NormalizeEnterTests(unittest.TestCase):
    def test_lone_lf_is_enter(self) -> None:
        state = PickerState(pages=[])
        self.assertEqual(_normalize_enter(state, "ENTER_LF"), "ENTER")
        self.assertEqual(_normalize_enter(state, "x"), "x")

    def test_lf_after_cr_is_dropped(self) -> None:
        state = PickerState(pages=[])
        self.assertEqual(_normalize_enter(state, "ENTER_CR"), "ENTER")
        self.assertIsNone(_normalize_enter(state, "ENTER_LF"))
        self.assertFalse(state.skip_next_lf)


if __name__ == "__main__":
    unittest.main()
