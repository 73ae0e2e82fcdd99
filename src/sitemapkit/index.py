"""Sitemap index — a ``sitemapindex`` document listing child sitemaps.

Re-adding a child location updates its ``lastmod`` in place instead of
adding a second record.  Indexes are never split, and reading one is flat:
child sitemaps are listed, not followed (see
:class:`~sitemapkit.sitemap.SitemapDocument` for the recursive read).
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from sitemapkit._errors import ValidationError
from sitemapkit.models.collection import UrlCollection
from sitemapkit.models.entry import UrlEntry
from sitemapkit.observability.collector import SitemapCollector
from sitemapkit.paths import normalize_file_path
from sitemapkit.serialize import (
    child_text,
    children_named,
    parse_document,
    render_sitemapindex,
)
from sitemapkit.storage import read_document, write_document

if TYPE_CHECKING:
    from pathlib import Path

    from sitemapkit._types import StrPath, Timestamp
    from sitemapkit.observability.log import EventLog


class SitemapIndexDocument:
    """A sitemap index bound to one file.

    Args:
        file_path: Index file path; normalised to ``.xml`` or ``.xml.gz``.
        gzip: Write the index gzip-compressed.
        read: Load the existing index when the file exists.
        collector: Event collector (a private one is created if omitted).

    """

    __slots__ = ("_collection", "_collector", "_file_path", "_gzip")

    def __init__(
        self,
        file_path: StrPath,
        gzip: bool = False,
        read: bool = True,
        *,
        collector: SitemapCollector | None = None,
    ) -> None:
        self._gzip = gzip
        self._file_path = normalize_file_path(file_path, gzip)
        self._collection = UrlCollection()
        self._collector = collector if collector is not None else SitemapCollector()

        if read and self._file_path.is_file():
            self._fill_collection()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def gzip(self) -> bool:
        return self._gzip

    @property
    def collection(self) -> UrlCollection:
        return self._collection

    @property
    def events(self) -> EventLog:
        return self._collector.log

    def add_sitemap(self, location: str, last_modified: Timestamp = None) -> None:
        """Add a child sitemap, or refresh the ``lastmod`` of an existing one.

        Raises:
            ValidationError: If *location* is not an absolute URL with a path.

        """
        self._collection.add_or_update(UrlEntry(location, last_modified))

    def remove_sitemap(self, location: str) -> bool:
        """Remove a child sitemap.  Returns False if it was not listed.

        Raises:
            ValidationError: If *location* is not an absolute URL with a path.

        """
        return self._collection.remove(UrlEntry(location))

    def count_items(self) -> int:
        return self._collection.count()

    def write(self) -> Path:
        """Write the whole index as one file and return its path."""
        t0 = time.perf_counter()
        data = render_sitemapindex(self._collection)
        size = write_document(self._file_path, data, compress=self._gzip)
        self._collector.record_write(
            self._file_path,
            "index",
            entries=self._collection.count(),
            size_bytes=size,
            compressed=self._gzip,
            duration_ms=(time.perf_counter() - t0) * 1000,
        )
        return self._file_path

    def _fill_collection(self) -> None:
        t0 = time.perf_counter()
        raw = read_document(self._file_path)
        if raw is None:
            self._collector.record_read(self._file_path, "missing")
            return

        root = parse_document(raw.data)
        if root is None:
            self._collector.record_read(
                self._file_path, "malformed", compressed=raw.compressed,
            )
            return

        elements = children_named(root, "sitemap")
        self._collector.record_read(
            self._file_path,
            "sitemapindex",
            entries=len(elements),
            compressed=raw.compressed,
            duration_ms=(time.perf_counter() - t0) * 1000,
        )

        for element in elements:
            loc = child_text(element, "loc")
            lastmod = child_text(element, "lastmod")
            if loc is None or lastmod is None:
                continue
            try:
                self.add_sitemap(loc, lastmod)
            except ValidationError as exc:
                self._collector.record_rejected(loc, self._file_path, str(exc))
