"""Utility helpers for URL handling and filename derivation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import unquote, urldefrag, urljoin, urlsplit, urlunsplit

from .errors import UrlParseError

FILENAME_PATTERN = re.compile(r"[^A-Za-z0-9._-]+")
DEFAULT_PORTS = {"http": 80, "https": 443}
CRAWLABLE_SCHEMES = frozenset(DEFAULT_PORTS)


@dataclass(frozen=True)
class Origin:
    """Scheme, host and port triple bounding the crawl."""

    scheme: str
    host: str
    port: Optional[int]

    @classmethod
    def from_url(cls, url: str) -> "Origin":
        """Compute the origin of an absolute URL.

        Raises ``ValueError`` when the port component is malformed.
        """
        parts = urlsplit(url)
        scheme = parts.scheme.lower()
        port = parts.port
        if port is None:
            port = DEFAULT_PORTS.get(scheme)
        return cls(scheme, parts.hostname or "", port)


def _canonical_netloc(parts) -> str:
    host = parts.hostname or ""
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    if port is not None and port != DEFAULT_PORTS.get(parts.scheme):
        host = f"{host}:{port}"
    userinfo, at, _ = parts.netloc.rpartition("@")
    return f"{userinfo}{at}{host}"


def _normalize(url: str) -> str:
    """Drop the fragment, lower-case scheme and host, and strip a default port."""
    url, _ = urldefrag(url)
    parts = urlsplit(url)
    if parts.netloc:
        parts = parts._replace(scheme=parts.scheme.lower(), netloc=_canonical_netloc(parts))
        if not parts.path:
            parts = parts._replace(path="/")
    return urlunsplit(parts)


def parse_seed_url(url: str) -> str:
    """Validate and normalize the seed URL."""
    url = url.strip()
    try:
        parts = urlsplit(url)
    except ValueError as exc:
        raise UrlParseError(f"Failed to parse URL {url!r}: {exc}") from exc
    if parts.scheme.lower() not in CRAWLABLE_SCHEMES:
        raise UrlParseError(f"Failed to parse URL {url!r}: expected an http(s) URL")
    if not parts.hostname:
        raise UrlParseError(f"Failed to parse URL {url!r}: missing host")
    try:
        Origin.from_url(url)
    except ValueError as exc:
        raise UrlParseError(f"Failed to parse URL {url!r}: {exc}") from exc
    return _normalize(url)


def resolve_url(base_url: str, reference: str) -> Optional[str]:
    """Resolve a reference against ``base_url``; ``None`` if it is unusable."""
    reference = reference.strip()
    if not reference:
        return None
    try:
        absolute = urljoin(base_url, reference)
        Origin.from_url(absolute)
    except ValueError:
        return None
    return _normalize(absolute)


def is_same_origin(url: str, origin: Origin) -> bool:
    try:
        return Origin.from_url(url) == origin
    except ValueError:
        return False


def domain_of(url: str) -> str:
    return urlsplit(url).hostname or "unknown"


def derive_filename(url: str, extension: str, fallback: str = "image") -> str:
    """Build ``<stem>.<extension>`` from the last path segment of ``url``."""
    segments = [s for s in urlsplit(url).path.split("/") if s]
    segment = unquote(segments[-1]) if segments else ""
    stem = PurePosixPath(segment).stem if segment else ""
    stem = FILENAME_PATTERN.sub("_", stem).strip("._")
    return f"{stem or fallback}.{extension}"
