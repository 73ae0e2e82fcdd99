"""Sitemapkit — read, extend and write XML sitemaps.

Builds ``urlset`` sitemaps with optional hreflang alternates, splits them
into chunk files plus a ``sitemapindex`` once they outgrow ``max_urls``,
and reads existing (optionally gzip-compressed) maps back so new pages can
be merged in without duplicates.

Quick start::

    from sitemapkit import SitemapDocument

    sitemap = SitemapDocument("/var/www/sitemap.xml", document_root="/var/www")
    sitemap.add_item("https://example.com/about/", priority=0.8)
    sitemap.add_item({
        "en": "https://example.com/en/pricing/",
        "de": "https://example.com/de/preise/",
    })
    sitemap.write()

"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sitemapkit._errors import ConfigError, SitemapError, ValidationError
    from sitemapkit.config import SitemapConfig
    from sitemapkit.config_loader import load_config
    from sitemapkit.index import SitemapIndexDocument
    from sitemapkit.models import UrlCollection, UrlEntry
    from sitemapkit.sitemap import SitemapDocument

__version__ = "0.1.0"
__all__ = [
    "ConfigError",
    "SitemapConfig",
    "SitemapDocument",
    "SitemapError",
    "SitemapIndexDocument",
    "UrlCollection",
    "UrlEntry",
    "ValidationError",
    "__version__",
    "load_config",
]

# public name -> defining module
_LAZY_IMPORTS = {
    "ConfigError": "sitemapkit._errors",
    "SitemapError": "sitemapkit._errors",
    "ValidationError": "sitemapkit._errors",
    "SitemapConfig": "sitemapkit.config",
    "load_config": "sitemapkit.config_loader",
    "SitemapIndexDocument": "sitemapkit.index",
    "UrlCollection": "sitemapkit.models",
    "UrlEntry": "sitemapkit.models",
    "SitemapDocument": "sitemapkit.sitemap",
}


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import sitemapkit`` fast (no XML or YAML import until needed).
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
