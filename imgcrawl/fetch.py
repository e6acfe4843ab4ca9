"""HTTP fetching with a fixed pre-request delay."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional

import requests

from .config import CrawlConfig
from .errors import NetworkError

logger = logging.getLogger("imgcrawl")

FetchFunc = Callable[..., Any]


def _default_fetch(session: requests.Session, url: str, **kwargs: Any) -> requests.Response:
    return session.get(url, **kwargs)


class FetchClient:
    """Downloads page text and image bytes through a shared ``requests`` session.

    Every call sleeps ``request_delay`` seconds first. The delay is per call,
    so concurrent callers are not throttled against each other. Blocking
    transport calls run in a worker thread so the event loop keeps serving
    other crawl tasks.
    """

    def __init__(
        self,
        config: CrawlConfig,
        session: Optional[requests.Session] = None,
        fetch_func: Optional[FetchFunc] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = config.user_agent
        self._fetch_func = fetch_func or _default_fetch
        self._limiter: Optional[asyncio.Semaphore] = None
        if config.max_concurrency:
            self._limiter = asyncio.Semaphore(config.max_concurrency)

    def _get(self, url: str):
        try:
            resp = self._fetch_func(self.session, url, timeout=self.config.request_timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise NetworkError(url, str(exc)) from exc
        return resp

    async def _request(self, url: str):
        if self.config.request_delay:
            await asyncio.sleep(self.config.request_delay)
        if self._limiter is None:
            return await asyncio.to_thread(self._get, url)
        async with self._limiter:
            return await asyncio.to_thread(self._get, url)

    async def fetch_text(self, url: str) -> str:
        resp = await self._request(url)
        return resp.text

    async def fetch_bytes(self, url: str) -> bytes:
        resp = await self._request(url)
        return resp.content

    def close(self) -> None:
        self.session.close()
