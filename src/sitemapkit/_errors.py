"""Sitemapkit error hierarchy.

All sitemapkit-specific errors inherit from SitemapError for easy catching.
"""


class SitemapError(Exception):
    """Base error for all sitemapkit operations."""


class ValidationError(SitemapError):
    """A value rejected by an entry setter (e.g. a malformed location)."""


class ConfigError(SitemapError):
    """Invalid or missing configuration."""
