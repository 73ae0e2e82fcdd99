"""Sitemap — a ``urlset`` document that splits itself when it grows too large.

A SitemapDocument owns a :class:`~sitemapkit.models.collection.UrlCollection`
bound to one file path.  Writing follows one of two paths:

- Up to ``max_urls`` entries: one sitemap file at the document's path.
- More entries: chunk files ``0_<name>``, ``1_<name>``, ... next to it, plus
  a sitemap index at the document's path listing each chunk's public URL.

Reading reverses both: an index at the document path is followed into its
chunk files (via the document root), so a split map reloads as one
collection and can be extended and rewritten without duplicates.

Example:
    >>> doc = SitemapDocument("/var/www/sitemap", document_root="/var/www")
    >>> doc.add_item("https://example.com/about/", priority=0.8)
    >>> doc.write()

"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import TYPE_CHECKING

from sitemapkit._errors import ConfigError, SitemapError, ValidationError
from sitemapkit.config import DEFAULT_MAX_BYTES, DEFAULT_MAX_URLS
from sitemapkit.index import SitemapIndexDocument
from sitemapkit.models.collection import UrlCollection
from sitemapkit.models.entry import UrlEntry
from sitemapkit.observability.collector import SitemapCollector
from sitemapkit.paths import (
    chunk_path,
    detect_document_root,
    filesystem_path,
    normalize_file_path,
    origin,
    public_url,
)
from sitemapkit.serialize import (
    child_text,
    children_named,
    local_name,
    parse_document,
    read_alternates,
    render_urlset,
)
from sitemapkit.storage import read_document, write_document

if TYPE_CHECKING:
    from pathlib import Path
    from xml.etree.ElementTree import Element

    from sitemapkit._types import Location, StrPath, Timestamp
    from sitemapkit.config import SitemapConfig
    from sitemapkit.observability.log import EventLog


class SitemapDocument:
    """A sitemap bound to one file.

    Args:
        file_path: Sitemap file path; normalised to ``.xml`` or ``.xml.gz``.
        gzip: Write gzip-compressed files.
        document_root: Directory served at the site root.  Defaults to the
            ``DOCUMENT_ROOT`` environment variable when omitted.
        read: Load the existing sitemap (and any chunks it indexes) when the
            file exists.
        max_urls: Maximum entries per file before the map is split.
        max_bytes: Advisory per-file size limit; not used for splitting.
        collector: Event collector (a private one is created if omitted).

    """

    __slots__ = (
        "_chunk_paths",
        "_collection",
        "_collector",
        "_document_root",
        "_file_path",
        "_gzip",
        "_max_bytes",
        "_max_urls",
        "use_xhtml_ns",
    )

    def __init__(
        self,
        file_path: StrPath,
        gzip: bool = False,
        document_root: StrPath | None = None,
        read: bool = True,
        *,
        max_urls: int = DEFAULT_MAX_URLS,
        max_bytes: int = DEFAULT_MAX_BYTES,
        collector: SitemapCollector | None = None,
    ) -> None:
        self._gzip = gzip
        self._file_path = normalize_file_path(file_path, gzip)
        self._document_root = (
            document_root if document_root is not None else detect_document_root()
        )
        self._collection = UrlCollection()
        self._collector = collector if collector is not None else SitemapCollector()
        self._chunk_paths: tuple[Path, ...] = ()
        self.max_urls = max_urls
        self.max_bytes = max_bytes
        self.use_xhtml_ns = False

        if read and self._file_path.is_file():
            self._fill_collection(self._file_path, set())

    @classmethod
    def from_config(
        cls,
        config: SitemapConfig,
        *,
        collector: SitemapCollector | None = None,
    ) -> SitemapDocument:
        """Build a document from a :class:`~sitemapkit.config.SitemapConfig`."""
        return cls(
            config.path,
            config.gzip,
            config.document_root,
            config.read,
            max_urls=config.max_urls,
            max_bytes=config.max_bytes,
            collector=collector,
        )

    # ----- Properties -----

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def gzip(self) -> bool:
        return self._gzip

    @property
    def document_root(self) -> StrPath | None:
        return self._document_root

    @property
    def collection(self) -> UrlCollection:
        return self._collection

    @property
    def events(self) -> EventLog:
        return self._collector.log

    @property
    def chunk_paths(self) -> tuple[Path, ...]:
        """Chunk files produced by the last :meth:`write` (empty if unsplit)."""
        return self._chunk_paths

    @property
    def max_urls(self) -> int:
        return self._max_urls

    @max_urls.setter
    def max_urls(self, value: int) -> None:
        if value < 1:
            msg = f"max_urls must be at least 1, got {value}"
            raise ConfigError(msg)
        self._max_urls = value

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @max_bytes.setter
    def max_bytes(self, value: int) -> None:
        if value < 1:
            msg = f"max_bytes must be at least 1, got {value}"
            raise ConfigError(msg)
        self._max_bytes = value

    # ----- Entries -----

    def add_item(
        self,
        location: Location,
        last_modified: Timestamp = None,
        change_frequency: str | None = None,
        priority: object = None,
    ) -> bool:
        """Add a page unless its location is already listed.

        Args:
            location: Page URL, or a mapping of language code -> URL for a
                localized page group.  For a mapping, the first URL becomes
                the canonical ``<loc>`` and every pair is emitted as an
                ``xhtml:link`` alternate.
            last_modified: Modification time (None means now).
            change_frequency: Crawl hint; invalid values become ``"daily"``.
            priority: ``0.0``-``1.0``; invalid values become ``"0.5"``.

        Returns:
            True if the page was added, False if it was already present (the
            existing entry is left untouched).

        Raises:
            ValidationError: If the canonical location is not an absolute URL
                with a path.  The collection is left unmodified.

        """
        if isinstance(location, Mapping):
            if not location:
                msg = "A localized page group needs at least one URL"
                raise ValidationError(msg)
            canonical = next(iter(location.values()))
            entry = UrlEntry(
                canonical, last_modified, change_frequency, priority, alternates=location,
            )
            self.use_xhtml_ns = True
        else:
            entry = UrlEntry(location, last_modified, change_frequency, priority)

        return self._collection.add_if_absent(entry)

    def remove_item(self, location: str) -> bool:
        """Remove a page.  Returns False if it was not listed.

        Raises:
            ValidationError: If *location* is not an absolute URL with a path.

        """
        return self._collection.remove(UrlEntry(location))

    def count_items(self) -> int:
        return self._collection.count()

    # ----- Writing -----

    def write(self) -> tuple[Path, ...]:
        """Write the sitemap, splitting it into chunks plus an index if needed.

        Returns:
            Every file written, the index (when present) last.

        Raises:
            OSError: If a file cannot be written.  Files written before the
                failure are left in place.

        """
        chunks = self._collection.chunk(self._max_urls)

        if len(chunks) == 1:
            self._write_urlset(chunks[0], self._file_path, "sitemap")
            self._chunk_paths = ()
            return (self._file_path,)

        index = SitemapIndexDocument(
            self._file_path, self._gzip, read=False, collector=self._collector,
        )
        first = self._collection.first()
        if first is None:
            msg = "Cannot split a sitemap with no entries"
            raise SitemapError(msg)
        site = origin(first.location)

        written: list[Path] = []
        for number, chunk in enumerate(chunks):
            path = chunk_path(self._file_path, number)
            self._write_urlset(chunk, path, "chunk")
            index.add_sitemap(public_url(path, self._document_root, site))
            written.append(path)

        self._chunk_paths = tuple(written)
        written.append(index.write())
        return tuple(written)

    def _write_urlset(self, entries: UrlCollection, path: Path, kind: str) -> None:
        t0 = time.perf_counter()
        data = render_urlset(entries, xhtml=self.use_xhtml_ns)
        size = write_document(path, data, compress=self._gzip)
        self._collector.record_write(
            path,
            kind,
            entries=entries.count(),
            size_bytes=size,
            compressed=self._gzip,
            duration_ms=(time.perf_counter() - t0) * 1000,
        )

    # ----- Reading -----

    def _fill_collection(self, path: Path, seen: set[Path]) -> None:
        """Load *path*, following index entries into their chunk files."""
        key = path.resolve()
        if key in seen:
            return
        seen.add(key)

        t0 = time.perf_counter()
        raw = read_document(path)
        if raw is None:
            self._collector.record_read(path, "missing")
            return

        root = parse_document(raw.data)
        if root is None:
            self._collector.record_read(path, "malformed", compressed=raw.compressed)
            return

        children = children_named(root, "sitemap")
        urls = children_named(root, "url")
        self._collector.record_read(
            path,
            "sitemapindex" if local_name(root.tag) == "sitemapindex" else "urlset",
            entries=len(children) + len(urls),
            compressed=raw.compressed,
            duration_ms=(time.perf_counter() - t0) * 1000,
        )

        for child in children:
            loc = child_text(child, "loc")
            if loc is not None:
                self._fill_collection(filesystem_path(loc, self._document_root), seen)

        for url_el in urls:
            self._load_url(url_el, path)

    def _load_url(self, url_el: Element, source: Path) -> None:
        loc = child_text(url_el, "loc") or ""
        alternates = read_alternates(url_el)
        try:
            self.add_item(
                alternates or loc,
                child_text(url_el, "lastmod"),
                child_text(url_el, "changefreq"),
                child_text(url_el, "priority"),
            )
        except ValidationError as exc:
            self._collector.record_rejected(loc, source, str(exc))
