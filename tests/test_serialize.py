"""Tests for sitemapkit.serialize — urlset/sitemapindex rendering and parsing."""

from __future__ import annotations

from xml.etree.ElementTree import fromstring

from sitemapkit.models.entry import UrlEntry
from sitemapkit.serialize import (
    child_text,
    children_named,
    parse_document,
    read_alternates,
    render_sitemapindex,
    render_urlset,
)

from .conftest import SITEMAP_NS, XHTML_NS, q

PAGE = "https://example.com/en/page/"


class TestRenderUrlset:
    """render_urlset — one <url> per entry with all four fields."""

    def test_declaration_and_root(self) -> None:
        data = render_urlset([])
        assert data.startswith(b'<?xml version="1.0" encoding="UTF-8"?>\n')
        root = fromstring(data)
        assert root.tag == q("urlset")
        assert b"xmlns:xhtml" not in data

    def test_fields(self) -> None:
        entry = UrlEntry(PAGE, "2024-01-01T00:00:00+00:00", "weekly", "0.7")
        root = fromstring(render_urlset([entry]))
        url = root.find(q("url"))
        assert url.find(q("loc")).text == PAGE
        assert url.find(q("lastmod")).text == entry.last_modified
        assert url.find(q("changefreq")).text == "weekly"
        assert url.find(q("priority")).text == "0.7"

    def test_alternates(self) -> None:
        entry = UrlEntry(
            PAGE,
            alternates={"en": PAGE, "de": "https://example.com/de/seite/"},
        )
        data = render_urlset([entry], xhtml=True)
        assert f'xmlns:xhtml="{XHTML_NS}"'.encode() in data

        links = fromstring(data).findall(f"{q('url')}/{{{XHTML_NS}}}link")
        assert [(link.get("hreflang"), link.get("href")) for link in links] == [
            ("en", PAGE),
            ("de", "https://example.com/de/seite/"),
        ]
        assert all(link.get("rel") == "alternate" for link in links)

    def test_alternates_declare_namespace_without_flag(self) -> None:
        entry = UrlEntry(PAGE, alternates={"en": PAGE})
        data = render_urlset([UrlEntry("https://example.com/plain/"), entry])
        assert f'xmlns:xhtml="{XHTML_NS}"'.encode() in data
        assert read_alternates(fromstring(data).findall(q("url"))[1]) == {"en": PAGE}

    def test_escaping(self) -> None:
        url = "https://example.com/search/?q=a&b=<c>"
        root = fromstring(render_urlset([UrlEntry(url)]))
        assert root.find(f"{q('url')}/{q('loc')}").text == url


class TestRenderSitemapindex:
    """render_sitemapindex — <sitemap> with loc and lastmod only."""

    def test_records(self) -> None:
        entries = [UrlEntry("https://example.com/0_sitemap.xml")]
        root = fromstring(render_sitemapindex(entries))
        assert root.tag == q("sitemapindex")
        record = root.find(q("sitemap"))
        assert record.find(q("loc")).text == "https://example.com/0_sitemap.xml"
        assert record.find(q("lastmod")) is not None
        assert record.find(q("priority")) is None


class TestParsing:
    """parse_document and lookup helpers — tolerant of bad input."""

    def test_malformed_returns_none(self) -> None:
        assert parse_document(b"<urlset><url>") is None
        assert parse_document(b"") is None
        assert parse_document(b"not xml at all") is None

    def test_namespaceless_document(self) -> None:
        root = parse_document(b"<urlset><url><loc> https://example.com/a/ </loc></url></urlset>")
        urls = children_named(root, "url")
        assert len(urls) == 1
        assert child_text(urls[0], "loc") == "https://example.com/a/"
        assert child_text(urls[0], "lastmod") is None

    def test_read_alternates(self) -> None:
        data = (
            f'<urlset xmlns="{SITEMAP_NS}" xmlns:xhtml="{XHTML_NS}"><url>'
            f"<loc>{PAGE}</loc>"
            f'<xhtml:link rel="alternate" hreflang="en" href="{PAGE}"/>'
            '<xhtml:link rel="alternate" hreflang="fr"/>'
            "</url></urlset>"
        ).encode()
        url = children_named(parse_document(data), "url")[0]
        assert read_alternates(url) == {"en": PAGE}
