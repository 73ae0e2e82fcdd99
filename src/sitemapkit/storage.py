"""Document storage — read and write sitemap bytes with transparent gzip.

Compression on write follows the document's flag.  Compression on read is
detected from the gzip magic header, never from the flag or the file
extension, so a compressed file named ``sitemap.xml`` (or a plain file
named ``sitemap.xml.gz``) still loads.
"""

from __future__ import annotations

import gzip
import zlib
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitemapkit._types import StrPath

GZIP_MAGIC = b"\x1f\x8b"


@dataclass(frozen=True, slots=True)
class RawDocument:
    """Bytes loaded from disk.

    Attributes:
        path: File the bytes were read from.
        data: Decompressed document bytes (empty if inflation failed).
        compressed: True if the file carried a gzip header.
        size_bytes: Size of the file on disk.

    """

    path: Path
    data: bytes
    compressed: bool
    size_bytes: int


def is_gzipped(data: bytes) -> bool:
    """Return True if *data* starts with the gzip magic header."""
    return data[:2] == GZIP_MAGIC


def read_document(path: StrPath) -> RawDocument | None:
    """Load a document, inflating it when gzip-framed.

    Returns None if the file does not exist.  A corrupt gzip stream yields
    a document with empty ``data`` rather than an error.
    """
    source = Path(path)
    try:
        raw = source.read_bytes()
    except (FileNotFoundError, IsADirectoryError):
        return None

    if not is_gzipped(raw):
        return RawDocument(path=source, data=raw, compressed=False, size_bytes=len(raw))

    try:
        data = gzip.decompress(raw)
    except (OSError, EOFError, zlib.error):
        data = b""
    return RawDocument(path=source, data=data, compressed=True, size_bytes=len(raw))


def write_document(path: StrPath, data: bytes, *, compress: bool = False) -> int:
    """Write *data* to *path*, gzip-framed if *compress*.

    Filesystem errors propagate unchanged; a partially written file is
    left in place.

    Returns:
        Number of bytes written to disk.

    """
    payload = gzip.compress(data) if compress else data
    Path(path).write_bytes(payload)
    return len(payload)
