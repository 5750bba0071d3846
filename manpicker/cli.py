"""Command-line front door for manpicker.

Parses CLI options, merges them with persisted preferences, checks that the
``man`` tooling is installed, and loads the page catalog. Then dispatches into
the interactive picker, or prints matches when ``--list`` is given.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from .ansi import strip_ansi
from .layout import LAYOUT_NAMES
from .man_pages import ManCommandError, ManPage, list_man_pages, missing_requirements
from .matching import filter_entries
from .runtime import run_picker
from .runtime.config import load_layout, load_section, load_theme_name
from .ui_theme import available_theme_names

MISSING_EXECUTABLE_MESSAGES = {
    "man": "System interface manual `man` not available!",
    "ul": "Formatter `ul` not available!",
}


def format_listing(query: str, pages: Iterable[ManPage]) -> str:
    """Render ``key  title`` lines for pages matching ``query``."""
    out: list[str] = []
    for entry in filter_entries(query, pages):
        out.append(f"{entry.key}  {strip_ansi(entry.label)}\n")
    return "".join(out)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the picker (or print a listing)."""
    parser = argparse.ArgumentParser(
        description="Browse manual pages with incremental filtering and a live preview."
    )
    parser.add_argument("--section", default=None, help="Manual section to list (default: 1).")
    parser.add_argument("--layout", choices=LAYOUT_NAMES, default=None, help="Pane arrangement.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--query", default="", help="Initial filter query.")
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print pages matching --query and exit without starting the UI.",
    )
    args = parser.parse_args(argv)

    interactive = not args.list and sys.stdin.isatty() and sys.stdout.isatty()
    missing = missing_requirements()
    if not interactive:
        missing = [name for name in missing if name == "man"]
    if missing:
        raise SystemExit(MISSING_EXECUTABLE_MESSAGES.get(missing[0], f"`{missing[0]}` not available!"))

    section = args.section or load_section()
    try:
        pages = list_man_pages(section)
    except ManCommandError as exc:
        raise SystemExit(str(exc)) from exc

    if not interactive:
        sys.stdout.write(format_listing(args.query, pages))
        return

    run_picker(
        pages,
        args.layout or load_layout(),
        theme_name=args.theme or load_theme_name(),
        no_color=args.no_color,
        query=args.query,
    )


if __name__ == "__main__":
    main()
