"""Background fetch worker for preview text.

Fetching a formatted page runs ``man`` and can take long enough to be felt
while scrolling, so it happens off the UI thread. Results are tagged with the
id of the request that produced them and only the newest request may update
the preview.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Queue


@dataclass(frozen=True)
class PreviewFetchRequest:
    """One preview fetch job."""

    request_id: int
    key: str
    width: int


@dataclass(frozen=True)
class PreviewFetchResult:
    """Completed fetch; ``text`` is ``None`` when no content was produced."""

    request: PreviewFetchRequest
    text: str | None


class PreviewFetchScheduler:
    """Single-threaded latest-request-wins fetch scheduler."""

    def __init__(self, fetch: Callable[[str, int], str | None]) -> None:
        self._fetch = fetch
        self._lock = threading.Lock()
        self._pending: PreviewFetchRequest | None = None
        self._running = False
        self._next_request_id = 1
        self._latest_request_id = 0
        self._results: Queue[PreviewFetchResult] = Queue()

    @property
    def latest_request_id(self) -> int:
        with self._lock:
            return self._latest_request_id

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return

            try:
                text = self._fetch(request.key, request.width)
            except Exception:
                text = None
            self._results.put(PreviewFetchResult(request=request, text=text))

    def schedule(self, key: str, width: int) -> int:
        """Queue/replace pending fetch work and return its request id."""
        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1
            self._latest_request_id = request_id
            self._pending = PreviewFetchRequest(request_id=request_id, key=key, width=width)
            if self._running:
                return request_id
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="manpicker-preview-fetch",
            daemon=True,
        )
        worker.start()
        return request_id

    def drain_results(self) -> list[PreviewFetchResult]:
        """Drain all completed fetch results, stale ones included."""
        out: list[PreviewFetchResult] = []
        while True:
            try:
                out.append(self._results.get_nowait())
            except Empty:
                break
        return out

    def latest_result(self) -> PreviewFetchResult | None:
        """Return the result of the newest request if it has arrived.

        Results of superseded requests are discarded.
        """
        latest_id = self.latest_request_id
        found: PreviewFetchResult | None = None
        for result in self.drain_results():
            if result.request.request_id == latest_id:
                found = result
        return found


__all__ = [
    "PreviewFetchRequest",
    "PreviewFetchResult",
    "PreviewFetchScheduler",
]
