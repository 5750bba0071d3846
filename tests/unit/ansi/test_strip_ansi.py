"""Tests for control-sequence stripping and display-width helpers."""

from __future__ import annotations

import unittest

from manpicker.ansi import char_display_width, clip_text, display_width, strip_ansi


class StripAnsiTests(unittest.TestCase):
    def test_plain_text_passes_through(self) -> None:
        self.assertEqual(strip_ansi("ls - list directory contents"), "ls - list directory contents")

    def test_removes_sgr_sequences(self) -> None:
        self.assertEqual(strip_ansi("\x1b[1mBOLD\x1b[0m \x1b[1;31mred\x1b[m"), "BOLD red")

    def test_removes_osc_with_each_terminator(self) -> None:
        self.assertEqual(strip_ansi("a\x1b]0;title\x07b"), "ab")
        self.assertEqual(strip_ansi("a\x1b]8;;http://x\x1b\\b"), "ab")
        self.assertEqual(strip_ansi("a\x1b]2;t\x9cb"), "ab")

    def test_removes_eight_bit_csi(self) -> None:
        self.assertEqual(strip_ansi("a\x9b2Jb"), "ab")

    def test_removes_cursor_and_private_mode_sequences(self) -> None:
        self.assertEqual(strip_ansi("\x1b[?25lhidden\x1b[?25h"), "hidden")
        self.assertEqual(strip_ansi("\x1b[10;20Hx\x1b[2K"), "x")

    def test_removes_short_escapes(self) -> None:
        self.assertEqual(strip_ansi("\x1b7save\x1b8\x1bMup\x1bc"), "saveup")

    def test_removes_charset_and_hash_escapes(self) -> None:
        self.assertEqual(strip_ansi("\x1b(Bascii\x1b)0\x1b#8"), "ascii")

    def test_removes_bare_status_report_fallback(self) -> None:
        self.assertEqual(strip_ansi("x\x1b5ny"), "xy")

    def test_unrecognized_escape_is_kept(self) -> None:
        self.assertEqual(strip_ansi("a\x1bXb"), "a\x1bXb")

    def test_idempotent(self) -> None:
        samples = [
            "",
            "plain",
            "\x1b[1mBOLD\x1b[0m plain",
            "\x1b]0;t\x07\x1b[?1049h\x1b(B\x1b#3text\x1b5n",
            "\x1b\x1b[1m[1mspliced",
            "a\x1bXb",
        ]
        for sample in samples:
            once = strip_ansi(sample)
            self.assertEqual(strip_ansi(once), once, msg=repr(sample))

    def test_spliced_introducer_is_removed(self) -> None:
        self.assertEqual(strip_ansi("\x1b\x1b[1m[1mx"), "x")


class DisplayWidthTests(unittest.TestCase):
    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(char_display_width("界", 0), 2)
        self.assertEqual(char_display_width("\u0301", 0), 0)
        self.assertEqual(char_display_width("\t", 3), 5)
        self.assertEqual(display_width("a界b"), 4)

    def test_clip_text_respects_wide_characters(self) -> None:
        self.assertEqual(clip_text("ab界c", 3), ("ab", 2))
        self.assertEqual(clip_text("ab界c", 4), ("ab界", 4))

    def test_clip_text_expands_tabs_and_drops_newlines(self) -> None:
        self.assertEqual(clip_text("a\tb\n", 20), ("a" + " " * 7 + "b", 9))


if __name__ == "__main__":
    unittest.main()
