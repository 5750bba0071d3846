"""Access to the system manual through the ``man`` executable.

Lists pages for one section, fetches formatted page text for previews, and
opens a page interactively. Preview fetches never raise: any failure is
reported as ``None`` so the UI can show an explicit empty state.
"""

from __future__ import annotations

import os
import shutil
import subprocess
from dataclasses import dataclass

REQUIRED_EXECUTABLES: tuple[str, ...] = ("man", "ul")
TITLE_SEPARATOR = "  - "


class ManCommandError(RuntimeError):
    """Raised when listing pages with ``man -k`` fails."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


@dataclass(frozen=True)
class ManPage:
    key: str
    title: str


def parse_man_output(output: str) -> list[ManPage]:
    """Parse ``man -k`` lines such as ``ls (1)  - list directory contents``.

    Lines with fewer than two whitespace-separated fields are skipped. The
    title is whatever follows the first ``"  - "`` separator, or empty.
    """
    pages: list[ManPage] = []
    for raw_line in output.splitlines():
        line = raw_line.strip()
        if not line:
            continue
        parts = line.split()
        if len(parts) < 2:
            continue
        key = parts[0].rstrip("(")
        sep_idx = line.find(TITLE_SEPARATOR)
        title = "" if sep_idx < 0 else line[sep_idx + len(TITLE_SEPARATOR) :].strip()
        pages.append(ManPage(key=key, title=title))
    return pages


def list_man_pages(section: str = "1") -> list[ManPage]:
    """Return every page in ``section`` as reported by ``man -k``."""
    try:
        proc = subprocess.run(
            ["man", "-k", ".", "-s", section],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise ManCommandError(f"failed to run man: {exc}") from exc
    stderr = proc.stderr.decode("utf-8", errors="replace")
    if proc.returncode != 0:
        raise ManCommandError(f"Command failed: {stderr.strip()}", stderr=stderr)
    return parse_man_output(proc.stdout.decode("utf-8", errors="replace"))


def preview_environment(width: int, base: dict[str, str] | None = None) -> dict[str, str]:
    """Environment asking ``man`` for ``width``-column output with SGR styling."""
    env = dict(os.environ if base is None else base)
    env["MANWIDTH"] = str(max(1, width))
    env["MAN_KEEP_FORMATTING"] = "1"
    env["GROFF_SGR"] = "1"
    return env


def fetch_man_page(key: str, width: int) -> str | None:
    """Return formatted text for page ``key`` or ``None`` when unavailable."""
    if not key:
        return None
    try:
        proc = subprocess.run(
            ["man", key],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            env=preview_environment(width),
            check=False,
        )
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout.decode("utf-8", errors="replace")


def open_man_page(key: str) -> str | None:
    """Run ``man key`` on the user's terminal; returns an error message or ``None``."""
    try:
        subprocess.run(["man", key], check=False)
    except OSError as exc:
        return f"failed to launch man: {exc}"
    return None


def missing_requirements() -> list[str]:
    """Names of required executables that are not on ``PATH``."""
    return [name for name in REQUIRED_EXECUTABLES if shutil.which(name) is None]


__all__ = [
    "ManCommandError",
    "ManPage",
    "REQUIRED_EXECUTABLES",
    "fetch_man_page",
    "list_man_pages",
    "missing_requirements",
    "open_man_page",
    "parse_man_output",
    "preview_environment",
]
