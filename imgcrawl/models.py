"""Data models used throughout the crawler pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class SaveStatus(str, Enum):
    WRITTEN = "written"
    SKIPPED_SMALLER = "skipped-smaller"
    SKIPPED_UNSUPPORTED = "skipped-unsupported-format"


@dataclass
class SaveResult:
    """Outcome of offering one downloaded image to the store."""

    status: SaveStatus
    filename: Optional[str] = None
    path: Optional[Path] = None

    @property
    def written(self) -> bool:
        return self.status is SaveStatus.WRITTEN


@dataclass(frozen=True)
class ImageVersion:
    """Best-known content observed for a derived filename."""

    byte_size: int
    content: bytes


@dataclass
class CrawlSummary:
    """Totals reported once the crawl finishes."""

    pages_visited: int
    images_claimed: int
    images_written: int
    elapsed_seconds: float
