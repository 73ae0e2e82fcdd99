"""Event log — bounded, thread-safe history of sitemap reads and writes.

The log answers the questions a caller has after opening or writing a
document: which files were written (and as what), which files could not be
read, and which records were skipped.

Thread Safety:
    All methods are protected by a ``threading.Lock``.  One log may be
    shared by documents that are written from different threads.

"""

import os
import threading
from collections import Counter, deque
from dataclasses import dataclass

from sitemapkit.observability.events import (
    DocumentRead,
    DocumentWritten,
    EntryRejected,
    SitemapEvent,
)


@dataclass(frozen=True, slots=True)
class LogSummary:
    """Totals over the events currently held by an :class:`EventLog`.

    Attributes:
        files_written: Written files per kind (``sitemap``/``chunk``/``index``).
        entries_written: Records written across all ``urlset`` files.
        bytes_written: Bytes written across all files.
        reads: Read attempts per status.
        rejected: Records skipped while reading.

    """

    files_written: dict[str, int]
    entries_written: int
    bytes_written: int
    reads: dict[str, int]
    rejected: int


def _file_of(event: SitemapEvent) -> str:
    match event:
        case EntryRejected(source=source):
            return source
        case DocumentWritten(path=path) | DocumentRead(path=path):
            return path


class EventLog:
    """Ring buffer of sitemap events, oldest first.

    Args:
        max_events: Maximum number of events to retain.  Older events are
            discarded once the buffer is full.

    """

    __slots__ = ("_events", "_lock")

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: deque[SitemapEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: SitemapEvent) -> None:
        with self._lock:
            self._events.append(event)

    def _snapshot(self) -> list[SitemapEvent]:
        with self._lock:
            return list(self._events)

    def query(
        self,
        *,
        event_type: type | None = None,
        path: str | os.PathLike[str] | None = None,
        kind: str | None = None,
        status: str | None = None,
    ) -> list[SitemapEvent]:
        """Events matching every given filter, in the order they happened.

        Args:
            event_type: Only events of this class.
            path: Only events about this file (the source file for
                :class:`EntryRejected`).
            kind: Only :class:`DocumentWritten` events of this kind.
            status: Only :class:`DocumentRead` events with this status.

        """
        wanted = os.fspath(path) if path is not None else None
        results: list[SitemapEvent] = []
        for event in self._snapshot():
            if event_type is not None and not isinstance(event, event_type):
                continue
            if wanted is not None and _file_of(event) != wanted:
                continue
            if kind is not None and not (
                isinstance(event, DocumentWritten) and event.kind == kind
            ):
                continue
            if status is not None and not (
                isinstance(event, DocumentRead) and event.status == status
            ):
                continue
            results.append(event)
        return results

    def written_files(self) -> list[str]:
        """Paths written, in write order (a rewritten file appears again)."""
        return [e.path for e in self._snapshot() if isinstance(e, DocumentWritten)]

    def rejected(self) -> list[EntryRejected]:
        """Records skipped while reading, in the order they were met."""
        return [e for e in self._snapshot() if isinstance(e, EntryRejected)]

    def summary(self) -> LogSummary:
        events = self._snapshot()
        written = [e for e in events if isinstance(e, DocumentWritten)]
        return LogSummary(
            files_written=dict(Counter(e.kind for e in written)),
            entries_written=sum(e.entries for e in written if e.kind != "index"),
            bytes_written=sum(e.size_bytes for e in written),
            reads=dict(Counter(e.status for e in events if isinstance(e, DocumentRead))),
            rejected=sum(isinstance(e, EntryRejected) for e in events),
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
