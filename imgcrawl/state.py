"""Shared crawl state with exactly-once claim semantics."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Set


class ClaimSet:
    """Set of URLs where insertion is the only way in and only one caller wins.

    The membership check and the insert happen under one lock, so two tasks
    claiming the same URL can never both observe success.
    """

    def __init__(self) -> None:
        self._items: Set[str] = set()
        self._lock = asyncio.Lock()

    async def claim(self, url: str) -> bool:
        async with self._lock:
            if url in self._items:
                return False
            self._items.add(url)
            return True

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class CrawlState:
    """Claim sets shared by every crawl task of one run."""

    visited: ClaimSet = field(default_factory=ClaimSet)
    downloaded: ClaimSet = field(default_factory=ClaimSet)
