"""Literal substring matching with highlight spans for the results list."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .man_pages import ManPage


@dataclass(frozen=True)
class MatchSpan:
    text: str
    highlighted: bool = False


@dataclass(frozen=True)
class ListEntry:
    """One visible results row: page key, description and its spans."""

    key: str
    label: str
    spans: tuple[MatchSpan, ...]


def highlight_matches(query: str, key: str) -> list[MatchSpan] | None:
    """Split ``key`` into plain and highlighted spans for ``query``.

    Matching is literal and case-sensitive; occurrences do not overlap.
    Returns ``None`` when a non-empty query does not occur in ``key``. An
    empty query always matches and yields ``key`` as a single plain span.
    The span texts always concatenate back to ``key``.
    """
    if not query:
        return [MatchSpan(key)]

    spans: list[MatchSpan] = []
    last = 0
    while True:
        pos = key.find(query, last)
        if pos < 0:
            break
        spans.append(MatchSpan(key[last:pos]))
        spans.append(MatchSpan(query, highlighted=True))
        last = pos + len(query)
    if not spans:
        return None
    if last < len(key):
        spans.append(MatchSpan(key[last:]))
    return spans


def filter_entries(query: str, pages: Iterable[ManPage]) -> list[ListEntry]:
    """Build result rows for pages whose title matches ``query``, in order."""
    entries: list[ListEntry] = []
    for page in pages:
        spans = highlight_matches(query, page.title)
        if spans is None:
            continue
        entries.append(ListEntry(key=page.key, label=page.title, spans=tuple(spans)))
    return entries


__all__ = ["ListEntry", "MatchSpan", "filter_entries", "highlight_matches"]
