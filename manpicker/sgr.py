"""Select-graphic-rendition parsing for formatted manual text.

Turns ``man`` output produced with ``GROFF_SGR=1`` into styled runs carrying
only the bold/underline attributes. Color and other SGR parameters are parsed
and ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

ESC = "\x1b"
SGR_TERMINATOR = "m"
MAX_STYLED_CHARS = 4096
UNSUPPORTED_PARAMETER = -1


@dataclass(frozen=True)
class StyledRun:
    """Contiguous text sharing one attribute state."""

    text: str
    bold: bool = False
    underline: bool = False


@dataclass(frozen=True)
class AttributeState:
    """Attributes applied to the run currently being accumulated."""

    bold: bool = False
    underline: bool = False

    def apply(self, parameter: int) -> AttributeState:
        """Return the state after one SGR parameter."""
        if parameter in (0, 22):
            return AttributeState()
        if parameter == 1:
            return AttributeState(bold=True, underline=self.underline)
        if parameter == 4:
            return AttributeState(bold=self.bold, underline=True)
        if parameter == 24:
            return AttributeState(bold=self.bold, underline=False)
        return self


def find_sgr(text: str, pos: int, terminator: str = SGR_TERMINATOR) -> tuple[int | None, int]:
    """Recognize one ``ESC [ digits terminator`` sequence at ``pos``.

    Returns ``(parameter, next_pos)``. ``parameter`` is ``None`` when no
    sequence was recognized; ``next_pos`` equals ``pos`` only when ``text[pos]``
    is not an introducer. A failed bracket check still consumes the introducer
    and the character read after it.

    An empty parameter is 0. A parameter that is not a plain digit run is
    reported as ``UNSUPPORTED_PARAMETER``. A sequence cut off by end of input
    consumes everything that remains.
    """
    n = len(text)
    if pos >= n or text[pos] != ESC:
        return None, pos
    pos += 1
    if pos >= n:
        return None, pos
    bracket = text[pos]
    pos += 1
    if bracket != "[":
        return None, pos

    end = text.find(terminator, pos)
    if end < 0:
        digits, next_pos = text[pos:], n
    else:
        digits, next_pos = text[pos:end], end + 1
    if not digits:
        return 0, next_pos
    if not (digits.isascii() and digits.isdigit()):
        return UNSUPPORTED_PARAMETER, next_pos
    return int(digits), next_pos


def escape_chars_to_styling(content: str) -> list[StyledRun]:
    """Split ``content`` into styled runs at every recognized SGR sequence.

    Only the first ``MAX_STYLED_CHARS`` characters are considered. A run is
    flushed at every sequence even when it is empty, so output commonly
    starts with an empty run; a trailing empty run is never emitted.
    """
    text = content[:MAX_STYLED_CHARS]
    runs: list[StyledRun] = []
    pending: list[str] = []
    state = AttributeState()
    pos = 0
    n = len(text)
    while pos < n:
        parameter, pos = find_sgr(text, pos)
        if parameter is not None:
            runs.append(StyledRun("".join(pending), state.bold, state.underline))
            pending = []
            state = state.apply(parameter)
            continue
        if pos < n:
            pending.append(text[pos])
            pos += 1

    if pending:
        runs.append(StyledRun("".join(pending), state.bold, state.underline))
    return runs


def runs_to_lines(runs: list[StyledRun]) -> list[list[StyledRun]]:
    """Split runs on newlines into per-line run lists.

    Empty fragments are dropped except that every line break yields a line,
    so blank lines in the page survive as empty lists.
    """
    lines: list[list[StyledRun]] = [[]]
    for run in runs:
        parts = run.text.split("\n")
        for idx, part in enumerate(parts):
            if idx > 0:
                lines.append([])
            part = part.rstrip("\r") if idx < len(parts) - 1 else part
            if part:
                lines[-1].append(StyledRun(part, run.bold, run.underline))
    if len(lines) > 1 and not lines[-1]:
        lines.pop()
    return lines


__all__ = [
    "AttributeState",
    "MAX_STYLED_CHARS",
    "StyledRun",
    "UNSUPPORTED_PARAMETER",
    "escape_chars_to_styling",
    "find_sgr",
    "runs_to_lines",
]
