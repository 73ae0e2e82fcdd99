"""Sitemapkit configuration.

SitemapConfig describes one sitemap document and is frozen after creation.
"""

from dataclasses import dataclass
from pathlib import Path

from sitemapkit._errors import ConfigError

# Protocol limits for a single sitemap file
DEFAULT_MAX_URLS = 50_000
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True, slots=True)
class SitemapConfig:
    """Configuration for a sitemap document.

    Attributes:
        path: Sitemap file path.  Normalised to ``.xml``/``.xml.gz`` by the
              document, not here.
        gzip: Write gzip-compressed files.
        document_root: Directory served at the site root.  None means "ask
            the environment" (``DOCUMENT_ROOT``) when the document is built.
        read: Load the existing file (if any) when the document is built.
        max_urls: Maximum ``<url>`` records per file before splitting.
        max_bytes: Advisory size limit per file; not used for splitting.

    """

    path: Path
    gzip: bool = False
    document_root: Path | None = None
    read: bool = True
    max_urls: int = DEFAULT_MAX_URLS
    max_bytes: int = DEFAULT_MAX_BYTES

    def __post_init__(self) -> None:
        if not isinstance(self.path, Path):
            object.__setattr__(self, "path", Path(self.path))
        if self.document_root is not None and not isinstance(self.document_root, Path):
            object.__setattr__(self, "document_root", Path(self.document_root))
        if self.max_urls < 1:
            msg = f"max_urls must be at least 1, got {self.max_urls}"
            raise ConfigError(msg)
        if self.max_bytes < 1:
            msg = f"max_bytes must be at least 1, got {self.max_bytes}"
            raise ConfigError(msg)
