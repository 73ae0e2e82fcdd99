"""Shared type definitions for sitemapkit."""

from collections.abc import Mapping
from datetime import date, datetime
from os import PathLike
from typing import Literal, TypeAlias

# Crawl hint for how often a page is expected to change
ChangeFrequency: TypeAlias = Literal[
    "always", "hourly", "daily", "weekly", "monthly", "yearly", "never"
]

# Anything accepted as a last-modified value (None means "now")
Timestamp: TypeAlias = datetime | date | int | float | str | None

# Language code -> localized URL
Alternates: TypeAlias = Mapping[str, str]

# A single canonical URL or a group of localized URLs
Location: TypeAlias = str | Alternates

# Filesystem path argument
StrPath: TypeAlias = str | PathLike[str]
