"""Shared test fixtures for sitemapkit."""

from __future__ import annotations

import gzip
from pathlib import Path
from xml.etree.ElementTree import Element, fromstring

import pytest

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"


@pytest.fixture
def doc_root(tmp_path: Path) -> Path:
    """A document root directory served at https://example.com/."""
    root = tmp_path / "www"
    root.mkdir()
    return root


@pytest.fixture(autouse=True)
def no_document_root_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a DOCUMENT_ROOT from the surrounding shell out of the tests."""
    monkeypatch.delenv("DOCUMENT_ROOT", raising=False)


def page_urls(count: int, prefix: str = "https://example.com/page") -> list[str]:
    """Distinct page URLs: ``https://example.com/page/0/`` etc."""
    return [f"{prefix}/{i}/" for i in range(count)]


def load_xml(path: Path) -> Element:
    """Parse a written document, inflating it if gzip-framed."""
    data = path.read_bytes()
    if data[:2] == b"\x1f\x8b":
        data = gzip.decompress(data)
    return fromstring(data)


def q(tag: str) -> str:
    """Qualify *tag* with the sitemap namespace."""
    return f"{{{SITEMAP_NS}}}{tag}"


def locs(root: Element, record: str = "url") -> list[str]:
    """All ``<loc>`` values of ``<url>`` (or ``<sitemap>``) records."""
    return [el.find(q("loc")).text for el in root.findall(q(record))]
