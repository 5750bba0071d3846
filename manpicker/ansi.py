"""Escape-sequence stripping and display-width helpers.

``strip_ansi`` removes every recognized terminal control sequence so text can
be measured or printed plainly. The width helpers keep pane rendering aligned
when descriptions contain wide characters.
"""

from __future__ import annotations

import re
import unicodedata

# Alternatives are tried in order; earlier branches win on ambiguous input.
ANSI_PATTERN = "|".join(
    (
        # OSC: ESC ] ... terminated by BEL, ESC \ or ST.
        r"(?:\x1b\][^\x07\x1b\x9c]*?(?:\x07|\x1b\\|\x9c))",
        r"(?:\x1b\[[\[\]()#;?]*(?:[0-9]{1,4}(?:[;:][0-9]{0,4})*)?[0-9A-PR-TZcf-nq-uy=><~])",
        r"(?:\x9b[\[\]()#;?]*(?:[0-9]{1,4}(?:[;:][0-9]{0,4})*)?[0-9A-PR-TZcf-nq-uy=><~])",
        r"(?:\x1b[ABCDHIKJSTZ=><sum78EMcNO])",
        r"(?:\x1b[()][AB012])",
        r"(?:\x1b#[34568])",
        # Bare device-status style sequences such as ESC 5 n.
        r"(?:\x1b[0-9]+n)",
    )
)
ANSI_RE = re.compile(ANSI_PATTERN)
TAB_STOP = 8


def strip_ansi(text: str) -> str:
    """Return ``text`` with all recognized control sequences removed.

    A sweep can splice an introducer onto the bytes following a removed
    sequence (``"\\x1b\\x1b[1m[1m"``), so sweeps repeat until nothing matches.
    Ordinary input is finished after the first sweep.
    """
    while True:
        text, count = ANSI_RE.subn("", text)
        if count == 0 or ("\x1b" not in text and "\x9b" not in text):
            return text


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return display width of plain text starting at column zero."""
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def clip_text(text: str, max_cols: int, start_col: int = 0) -> tuple[str, int]:
    """Trim plain text so it fits ``max_cols`` columns.

    ``start_col`` is the visual column the text begins at, which matters for
    tab expansion. Returns the clipped text (tabs expanded to spaces) and the
    number of columns it occupies.
    """
    if max_cols <= 0 or not text:
        return "", 0

    out: list[str] = []
    used = 0
    for ch in text:
        if ch in "\r\n":
            continue
        w = char_display_width(ch, start_col + used)
        if used + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        used += w
    return "".join(out), used


__all__ = [
    "ANSI_PATTERN",
    "ANSI_RE",
    "TAB_STOP",
    "char_display_width",
    "clip_text",
    "display_width",
    "strip_ansi",
]
