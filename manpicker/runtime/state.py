from __future__ import annotations

from dataclasses import dataclass, field

from ..layout import DEFAULT_LAYOUT
from ..man_pages import ManPage
from ..matching import ListEntry
from ..sgr import StyledRun
from ..viewport import ViewportScroller

PREVIEW_PENDING = "pending"
PREVIEW_READY = "ready"
PREVIEW_EMPTY = "empty"


@dataclass
class PickerState:
    """Mutable picker session state shared by the loop, ops and renderer."""

    pages: list[ManPage]
    layout: str = DEFAULT_LAYOUT
    query: str = ""
    entries: list[ListEntry] = field(default_factory=list)
    scroller: ViewportScroller = field(default_factory=ViewportScroller)
    preview_runs: list[StyledRun] = field(default_factory=list)
    preview_status: str = PREVIEW_PENDING
    preview_key: str = ""
    preview_width: int = 0
    preview_request_id: int = 0
    status_message: str = ""
    dirty: bool = True
    skip_next_lf: bool = False
