"""Sitemap data model — entries and the deduplicating collection."""

from sitemapkit.models.collection import UrlCollection
from sitemapkit.models.entry import (
    CHANGE_FREQUENCIES,
    DEFAULT_CHANGE_FREQUENCY,
    DEFAULT_PRIORITY,
    UrlEntry,
)

__all__ = [
    "CHANGE_FREQUENCIES",
    "DEFAULT_CHANGE_FREQUENCY",
    "DEFAULT_PRIORITY",
    "UrlCollection",
    "UrlEntry",
]
