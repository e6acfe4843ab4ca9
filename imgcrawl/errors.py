"""Exception types raised by the crawler."""

from __future__ import annotations


class CrawlError(Exception):
    """Base class for crawl failures."""


class UrlParseError(CrawlError, ValueError):
    """Raised when the seed URL cannot be used as a crawl origin."""


class NetworkError(CrawlError):
    """A page or image fetch failed at the transport or HTTP level."""

    def __init__(self, url: str, message: str) -> None:
        super().__init__(f"{url}: {message}")
        self.url = url
