"""Byte-size buckets used in the download directory layout."""

from __future__ import annotations

from enum import Enum

SMALL_LIMIT = 100 * 1024
MEDIUM_LIMIT = 1024 * 1024


class SizeCategory(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


def categorize(byte_size: int) -> SizeCategory:
    """Map a byte count to its size category; boundaries round up."""
    if byte_size < SMALL_LIMIT:
        return SizeCategory.SMALL
    if byte_size < MEDIUM_LIMIT:
        return SizeCategory.MEDIUM
    return SizeCategory.LARGE
