"""XML rendering and parsing for ``urlset`` and ``sitemapindex`` documents.

Rendering produces a UTF-8 document with an XML declaration.  Parsing is
tolerant: malformed input returns None, and element lookups match on local
names so documents written without the sitemap namespace still load.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import (
    Element,
    ParseError,
    SubElement,
    fromstring,
    indent,
    tostring,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sitemapkit.models.entry import UrlEntry

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
XHTML_NS = "http://www.w3.org/1999/xhtml"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
_XHTML_LINK = f"{{{XHTML_NS}}}link"


def _finish(root: Element) -> bytes:
    indent(root)
    xml = tostring(root, encoding="unicode", xml_declaration=False)
    return (_XML_DECLARATION + xml + "\n").encode("utf-8")


def _text_element(parent: Element, tag: str, text: str) -> None:
    SubElement(parent, tag).text = text


def render_urlset(entries: Iterable[UrlEntry], *, xhtml: bool = False) -> bytes:
    """Render a ``urlset`` sitemap.

    Args:
        entries: Entries in output order.
        xhtml: Declare the ``xhtml`` namespace on the root even when no
            entry has alternates.  It is always declared when one does.

    """
    entries = list(entries)
    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)
    if xhtml or any(entry.alternates for entry in entries):
        urlset.set("xmlns:xhtml", XHTML_NS)

    for entry in entries:
        url_el = SubElement(urlset, "url")
        _text_element(url_el, "loc", entry.location)
        _text_element(url_el, "lastmod", entry.last_modified)
        _text_element(url_el, "changefreq", entry.change_frequency)
        _text_element(url_el, "priority", entry.priority)
        for lang, href in entry.alternates.items():
            SubElement(
                url_el,
                "xhtml:link",
                {"rel": "alternate", "hreflang": lang, "href": href},
            )

    return _finish(urlset)


def render_sitemapindex(entries: Iterable[UrlEntry]) -> bytes:
    """Render a ``sitemapindex`` document (``loc`` and ``lastmod`` only)."""
    index = Element("sitemapindex")
    index.set("xmlns", SITEMAP_NS)

    for entry in entries:
        sitemap_el = SubElement(index, "sitemap")
        _text_element(sitemap_el, "loc", entry.location)
        _text_element(sitemap_el, "lastmod", entry.last_modified)

    return _finish(index)


def parse_document(data: bytes) -> Element | None:
    """Parse document bytes.  Returns None for empty or malformed XML."""
    if not data.strip():
        return None
    try:
        return fromstring(data)
    except ParseError:
        return None


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def children_named(element: Element, name: str) -> list[Element]:
    return [child for child in element if local_name(child.tag) == name]


def child_text(element: Element, name: str) -> str | None:
    """Stripped text of the first child called *name*, or None if absent/empty."""
    for child in children_named(element, name):
        text = (child.text or "").strip()
        return text or None
    return None


def read_alternates(url_el: Element) -> dict[str, str]:
    """Collect ``xhtml:link`` alternates of a ``<url>`` as hreflang -> href."""
    alternates: dict[str, str] = {}
    for link in url_el.iter(_XHTML_LINK):
        lang = link.get("hreflang")
        href = link.get("href")
        if lang and href:
            alternates[lang] = href
    return alternates
