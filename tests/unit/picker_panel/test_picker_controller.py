"""Tests for picker controller operations."""

from __future__ import annotations

import unittest

from manpicker.layout import HORIZONTAL, VERTICAL
from manpicker.man_pages import ManPage
from manpicker.picker_panel import PickerDeps, PickerOps
from manpicker.runtime.preview_fetch import PreviewFetchRequest, PreviewFetchResult
from manpicker.runtime.state import PREVIEW_EMPTY, PREVIEW_PENDING, PREVIEW_READY, PickerState
from manpicker.sgr import StyledRun
from manpicker.viewport import ViewportScroller

PAGES = [
    ManPage("ls", "list directory contents"),
    ManPage("cp", "copy files and directories"),
    ManPage("chmod", "change file mode bits"),
    ManPage("mv", "move (rename) files"),
]


class _FakePreviewWorker:
    def __init__(self) -> None:
        self.scheduled: list[tuple[str, int]] = []
        self.pending: PreviewFetchResult | None = None

    def schedule(self, key: str, width: int) -> int:
        self.scheduled.append((key, width))
        return len(self.scheduled)

    def finish(self, request_id: int, text: str | None) -> None:
        key, width = self.scheduled[request_id - 1]
        self.pending = PreviewFetchResult(PreviewFetchRequest(request_id, key, width), text)

    def latest_result(self) -> PreviewFetchResult | None:
        result = self.pending
        self.pending = None
        return result


def _make_ops(
    pages: list[ManPage] | None = None,
    *,
    list_height: int = 10,
) -> tuple[PickerOps, _FakePreviewWorker, list[str], list[str]]:
    worker = _FakePreviewWorker()
    opened: list[str] = []
    saved_layouts: list[str] = []
    state = PickerState(
        pages=list(PAGES if pages is None else pages),
        scroller=ViewportScroller(height=list_height),
    )

    def open_page(key: str) -> str | None:
        opened.append(key)
        return None

    ops = PickerOps(
        PickerDeps(
            state=state,
            schedule_preview=worker.schedule,
            latest_preview_result=worker.latest_result,
            open_page=open_page,
            save_layout=saved_layouts.append,
        )
    )
    ops.refresh_matches()
    return ops, worker, opened, saved_layouts


class QueryAndSelectionTests(unittest.TestCase):
    def test_empty_query_lists_everything_with_first_selected(self) -> None:
        ops, _, _, _ = _make_ops()
        self.assertEqual([entry.key for entry in ops.state.entries], ["ls", "cp", "chmod", "mv"])
        self.assertEqual(ops.selected_key(), "ls")

    def test_query_filters_and_clamps_selection(self) -> None:
        ops, _, _, _ = _make_ops()
        ops.move_selection(3)
        self.assertEqual(ops.selected_key(), "mv")

        ops.append_query("f")
        ops.append_query("i")
        self.assertEqual([entry.key for entry in ops.state.entries], ["cp", "chmod", "mv"])
        self.assertEqual(ops.state.scroller.selection, 2)

        ops.append_query("les")
        self.assertEqual([entry.key for entry in ops.state.entries], ["cp", "mv"])
        self.assertEqual(ops.selected_key(), "mv")

    def test_no_matches_clears_selection(self) -> None:
        ops, _, _, _ = _make_ops()
        ops.append_query("zzz")
        self.assertEqual(ops.state.entries, [])
        self.assertIsNone(ops.state.scroller.selection)
        self.assertIsNone(ops.selected_entry())
        self.assertEqual(ops.selected_key(), "")
        self.assertFalse(ops.move_selection(1))

        self.assertTrue(ops.delete_query_char())
        self.assertEqual(ops.state.query, "zz")

    def test_delete_on_empty_query_is_noop(self) -> None:
        ops, _, _, _ = _make_ops()
        ops.state.dirty = False
        self.assertFalse(ops.delete_query_char())
        self.assertFalse(ops.state.dirty)

    def test_selection_wraps_both_ways(self) -> None:
        ops, _, _, _ = _make_ops()
        self.assertTrue(ops.move_selection(-1))
        self.assertEqual(ops.selected_key(), "mv")
        self.assertTrue(ops.move_selection(1))
        self.assertEqual(ops.selected_key(), "ls")
        self.assertTrue(ops.move_selection(10))
        self.assertEqual(ops.state.scroller.selection, 2)

    def test_single_item_move_reports_no_change(self) -> None:
        ops, _, _, _ = _make_ops([ManPage("ls", "list directory contents")])
        self.assertFalse(ops.move_selection(1))

    def test_set_list_height_marks_dirty_when_offset_moves(self) -> None:
        ops, _, _, _ = _make_ops(list_height=4)
        ops.move_selection(3)
        ops.state.dirty = False
        ops.set_list_height(4)
        self.assertFalse(ops.state.dirty)
        ops.set_list_height(2)
        self.assertTrue(ops.state.dirty)
        self.assertEqual(ops.state.scroller.offset, 2)


class LayoutTests(unittest.TestCase):
    def test_layout_switch_is_persisted_once(self) -> None:
        ops, _, _, saved = _make_ops()
        self.assertEqual(ops.state.layout, VERTICAL)
        self.assertTrue(ops.set_layout(HORIZONTAL))
        self.assertFalse(ops.set_layout(HORIZONTAL))
        self.assertEqual(ops.state.layout, HORIZONTAL)
        self.assertEqual(saved, [HORIZONTAL])


class PreviewTests(unittest.TestCase):
    def test_request_waits_for_known_width(self) -> None:
        ops, worker, _, _ = _make_ops()
        self.assertFalse(ops.request_preview(0))
        self.assertEqual(worker.scheduled, [])

    def test_request_is_issued_once_per_key_and_width(self) -> None:
        ops, worker, _, _ = _make_ops()
        self.assertTrue(ops.request_preview(78))
        self.assertFalse(ops.request_preview(78))
        self.assertEqual(ops.state.preview_status, PREVIEW_PENDING)

        ops.move_selection(1)
        self.assertTrue(ops.request_preview(78))
        self.assertTrue(ops.request_preview(60))
        self.assertEqual(worker.scheduled, [("ls", 78), ("cp", 78), ("cp", 60)])

    def test_finished_preview_is_styled(self) -> None:
        ops, worker, _, _ = _make_ops()
        ops.request_preview(78)
        worker.finish(1, "\x1b[1mNAME\x1b[0m\n")
        self.assertTrue(ops.apply_preview_results())
        self.assertEqual(ops.state.preview_status, PREVIEW_READY)
        self.assertEqual(
            ops.state.preview_runs,
            [StyledRun(""), StyledRun("NAME", True), StyledRun("\n")],
        )

    def test_stale_result_is_ignored(self) -> None:
        ops, worker, _, _ = _make_ops()
        ops.request_preview(78)
        ops.move_selection(1)
        ops.request_preview(78)
        worker.finish(1, "ls page")
        self.assertFalse(ops.apply_preview_results())
        self.assertEqual(ops.state.preview_status, PREVIEW_PENDING)
        self.assertEqual(ops.state.preview_runs, [])

    def test_failed_fetch_shows_empty_preview(self) -> None:
        ops, worker, _, _ = _make_ops()
        ops.request_preview(78)
        worker.finish(1, None)
        self.assertTrue(ops.apply_preview_results())
        self.assertEqual(ops.state.preview_status, PREVIEW_EMPTY)

    def test_no_selection_clears_preview_without_fetch(self) -> None:
        ops, worker, _, _ = _make_ops()
        ops.request_preview(78)
        ops.append_query("zzz")
        self.assertFalse(ops.request_preview(78))
        self.assertEqual(worker.scheduled, [("ls", 78)])
        self.assertEqual(ops.state.preview_status, PREVIEW_EMPTY)
        self.assertEqual(ops.state.preview_request_id, 0)


class ActivateTests(unittest.TestCase):
    def test_activate_opens_selected_page(self) -> None:
        ops, _, opened, _ = _make_ops()
        ops.move_selection(2)
        ops.activate_selection()
        self.assertEqual(opened, ["chmod"])
        self.assertEqual(ops.state.status_message, "")

    def test_activate_reports_launch_errors(self) -> None:
        ops, _, _, _ = _make_ops()
        ops._open_page = lambda _key: "man: command failed"
        ops.activate_selection()
        self.assertEqual(ops.state.status_message, "man: command failed")

    def test_activate_without_selection_does_nothing(self) -> None:
        ops, _, opened, _ = _make_ops([])
        ops.activate_selection()
        self.assertEqual(opened, [])


if __name__ == "__main__":
    unittest.main()
