"""Observability — an event model for sitemap reads and writes.

All events are frozen dataclasses with nanosecond timestamps.

Quick Start:
    >>> from sitemapkit.observability import EventLog, SitemapCollector
    >>> log = EventLog()
    >>> collector = SitemapCollector(log)
    >>> # SitemapDocument("sitemap.xml", collector=collector).write()
    >>> # log.query(kind="chunk")

"""

from sitemapkit.observability.collector import SitemapCollector
from sitemapkit.observability.events import (
    DocumentRead,
    DocumentWritten,
    EntryRejected,
    SitemapEvent,
    now_ns,
)
from sitemapkit.observability.log import EventLog, LogSummary

__all__ = [
    "DocumentRead",
    "DocumentWritten",
    "EntryRejected",
    "EventLog",
    "LogSummary",
    "SitemapCollector",
    "SitemapEvent",
    "now_ns",
]
