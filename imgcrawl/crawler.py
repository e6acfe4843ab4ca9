"""Recursive same-origin crawl that downloads every discovered image."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Optional

from .config import CrawlConfig
from .content import extract_images, extract_links, parse_document
from .fetch import FetchClient
from .images import ImageStore
from .models import CrawlSummary
from .state import CrawlState
from .utils import Origin, parse_seed_url

logger = logging.getLogger("imgcrawl")


class CrawlEngine:
    """Walks one origin, fanning out a task per discovered link.

    ``crawl`` returns only after every page reachable through its links has
    been attempted. A fetch or store failure anywhere is not caught here: it
    propagates through the awaiting parents and ends the run.
    """

    def __init__(
        self,
        origin: Origin,
        client: FetchClient,
        store: ImageStore,
        state: Optional[CrawlState] = None,
    ) -> None:
        self.origin = origin
        self.client = client
        self.store = store
        self.state = state or CrawlState()

    async def crawl(self, url: str) -> None:
        if not await self.state.visited.claim(url):
            logger.debug("Already visited %s", url)
            return

        logger.info("Crawling: %s", url)
        html = await self.client.fetch_text(url)
        document = parse_document(html)

        for image_url in extract_images(document, url, self.origin):
            if await self.state.downloaded.claim(image_url):
                await self._download_image(image_url)

        children = [self.crawl(link) for link in extract_links(document, url, self.origin)]
        if children:
            await asyncio.gather(*children)

    async def _download_image(self, url: str) -> None:
        logger.info("Downloading: %s", url)
        data = await self.client.fetch_bytes(url)
        await self.store.save(url, data)


async def run_crawler(
    seed_url: str,
    config: CrawlConfig,
    client: Optional[FetchClient] = None,
) -> CrawlSummary:
    """Crawl from ``seed_url`` and return visit and download totals."""
    seed = parse_seed_url(seed_url)
    origin = Origin.from_url(seed)
    config.output_root.mkdir(parents=True, exist_ok=True)

    owns_client = client is None
    client = client or FetchClient(config)
    store = ImageStore(config.output_root)
    engine = CrawlEngine(origin, client, store)

    start = time.perf_counter()
    try:
        await engine.crawl(seed)
    finally:
        if owns_client:
            client.close()

    return CrawlSummary(
        pages_visited=len(engine.state.visited),
        images_claimed=len(engine.state.downloaded),
        images_written=store.written_count,
        elapsed_seconds=time.perf_counter() - start,
    )
