"""Path naming — file names for documents and chunks, and URL <-> path mapping.

Pure helpers with no state.  The document root is the filesystem directory
served at the site's public URL root; it is used to publish chunk files in
an index and to find them again when the index is read back.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

if TYPE_CHECKING:
    from sitemapkit._types import StrPath

_EXTENSION_TOKENS = frozenset({"xml", "gz"})
_REPEATED_SLASHES = re.compile(r"/{2,}")


def _collapse(path: str) -> str:
    return _REPEATED_SLASHES.sub("/", path)


def normalize_file_path(path: StrPath, gzip: bool = False) -> Path:
    """Force a ``.xml`` (and ``.xml.gz`` when compressed) file name.

    Existing ``xml``/``gz`` extension tokens are dropped before the suffixes
    are re-appended, so ``sitemap``, ``sitemap.xml`` and ``sitemap.xml.gz``
    all map to the same document.
    Relative paths are anchored at the current working directory.

    Examples:
        >>> normalize_file_path("/www/sitemap.xml.gz", gzip=False).name
        'sitemap.xml'
        >>> normalize_file_path("/www/sitemap", gzip=True).name
        'sitemap.xml.gz'

    """
    original = Path(path)
    stem, *extensions = original.name.split(".")
    tokens = [stem, *(t for t in extensions if t not in _EXTENSION_TOKENS), "xml"]
    if gzip:
        tokens.append("gz")
    return original.with_name(".".join(tokens)).absolute()


def chunk_path(base_path: StrPath, index: int) -> Path:
    """Path of chunk *index*: ``dir/name.ext`` -> ``dir/{index}_name.ext``."""
    base = Path(base_path)
    return base.with_name(f"{index}_{base.name}")


def origin(url: str) -> str:
    """Return ``scheme://host[:port]`` of *url*."""
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}"


def public_url(
    filesystem_path: StrPath,
    document_root: StrPath | None,
    scheme_and_host: str,
) -> str:
    """Public URL of a file served from under *document_root*.

    Args:
        filesystem_path: File to publish.
        document_root: Directory served at ``/``.  When None the whole
            filesystem path is used as the URL path.
        scheme_and_host: Site origin, e.g. ``"https://example.com"``.

    """
    file = Path(filesystem_path).absolute()
    path = file.as_posix()
    if document_root is not None:
        # compared resolved: ".." segments and symlinks on either side
        resolved = file.resolve()
        root = Path(document_root).resolve()
        if resolved == root:
            path = ""
        elif resolved.is_relative_to(root):
            path = resolved.relative_to(root).as_posix()
    return scheme_and_host.rstrip("/") + _collapse("/" + path)


def filesystem_path(url: str, document_root: StrPath | None) -> Path:
    """Inverse of :func:`public_url`: map a URL's path under *document_root*."""
    root = "" if document_root is None else Path(document_root).as_posix()
    return Path(_collapse(f"{root}/{urlsplit(url).path}"))


def detect_document_root() -> str | None:
    """Document root advertised by the hosting environment, if any."""
    return os.environ.get("DOCUMENT_ROOT") or None
