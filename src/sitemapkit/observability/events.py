"""Event model for sitemap reads and writes.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Literal, TypeAlias


@dataclass(frozen=True, slots=True)
class DocumentWritten:
    """A sitemap, chunk or index file was written.

    Attributes:
        path: Filesystem path of the written file.
        kind: ``"sitemap"`` for a single-file map, ``"chunk"`` for one part
            of a split map, ``"index"`` for a sitemap index.
        entries: Number of ``<url>``/``<sitemap>`` records in the file.
        size_bytes: Size of the file on disk.
        compressed: True if the file was gzip-framed.
        duration_ms: Time spent rendering and writing.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    kind: Literal["sitemap", "chunk", "index"]
    entries: int
    size_bytes: int
    compressed: bool
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class DocumentRead:
    """An existing file was loaded (or found unusable) during a read.

    Attributes:
        path: Filesystem path that was read.
        status: ``"urlset"``/``"sitemapindex"`` for parsed documents,
            ``"missing"`` if the file was absent, ``"malformed"`` if it could
            not be inflated or parsed.
        entries: Number of records found in the document.
        compressed: True if the file carried a gzip header.
        duration_ms: Time spent loading and parsing.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    path: str
    status: Literal["urlset", "sitemapindex", "missing", "malformed"]
    entries: int
    compressed: bool
    duration_ms: float
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class EntryRejected:
    """A record read from disk was skipped because its location is invalid.

    Attributes:
        location: The offending ``<loc>`` text (empty if missing).
        source: Path of the file the record came from.
        reason: Validation message.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    location: str
    source: str
    reason: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

SitemapEvent: TypeAlias = DocumentWritten | DocumentRead | EntryRejected


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
