"""HTML parsing and same-origin reference extraction."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from .utils import Origin, is_same_origin, resolve_url


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _collect(
    document: BeautifulSoup,
    selector: str,
    attribute: str,
    page_url: str,
    origin: Origin,
) -> List[str]:
    """Resolve ``attribute`` of every tag matching ``selector``, in document order.

    Unresolvable references and URLs outside ``origin`` are dropped.
    Duplicates are kept; the crawler's claim sets deduplicate.
    """
    urls: List[str] = []
    for tag in document.select(selector):
        value = tag.get(attribute)
        if not value:
            continue
        absolute = resolve_url(page_url, value)
        if absolute and is_same_origin(absolute, origin):
            urls.append(absolute)
    return urls


def extract_images(document: BeautifulSoup, page_url: str, origin: Origin) -> List[str]:
    """Return same-origin ``<img src>`` URLs found on the page."""
    return _collect(document, "img[src]", "src", page_url, origin)


def extract_links(document: BeautifulSoup, page_url: str, origin: Origin) -> List[str]:
    """Return same-origin ``<a href>`` URLs found on the page."""
    return _collect(document, "a[href]", "href", page_url, origin)
