"""Test suite for sitemapkit."""
