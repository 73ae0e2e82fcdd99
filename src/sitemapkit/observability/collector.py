"""Sitemap collector — records document reads and writes into an EventLog.

Every document owns a collector.  Pass one collector to several documents
to gather their events in a single log.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sitemapkit.observability.events import (
    DocumentRead,
    DocumentWritten,
    EntryRejected,
    now_ns,
)
from sitemapkit.observability.log import EventLog

if TYPE_CHECKING:
    from pathlib import Path


class SitemapCollector:
    """Event collector for sitemap documents.

    Args:
        log: The EventLog to store events in.

    """

    __slots__ = ("_log",)

    def __init__(self, log: EventLog | None = None) -> None:
        self._log = log if log is not None else EventLog()

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    def record_write(
        self,
        path: Path | str,
        kind: str,
        *,
        entries: int = 0,
        size_bytes: int = 0,
        compressed: bool = False,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a written sitemap, chunk or index file."""
        self._log.append(
            DocumentWritten(
                path=str(path),
                kind=kind,  # type: ignore[arg-type]
                entries=entries,
                size_bytes=size_bytes,
                compressed=compressed,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_read(
        self,
        path: Path | str,
        status: str,
        *,
        entries: int = 0,
        compressed: bool = False,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a document read attempt."""
        self._log.append(
            DocumentRead(
                path=str(path),
                status=status,  # type: ignore[arg-type]
                entries=entries,
                compressed=compressed,
                duration_ms=duration_ms,
                timestamp_ns=now_ns(),
            )
        )

    def record_rejected(self, location: str, source: Path | str, reason: str) -> None:
        """Record a record skipped during a read."""
        self._log.append(
            EntryRejected(
                location=location,
                source=str(source),
                reason=reason,
                timestamp_ns=now_ns(),
            )
        )
