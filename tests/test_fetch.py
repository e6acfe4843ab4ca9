import asyncio

import pytest
import requests

from imgcrawl import fetch
from imgcrawl.config import CrawlConfig
from imgcrawl.errors import NetworkError
from imgcrawl.fetch import FetchClient


class DummyResp:
    def __init__(self, url: str, status_code: int = 200, body: bytes = b"<html></html>"):
        self.url = url
        self.status_code = status_code
        self.content = body
        self.text = body.decode("utf-8")

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error for url: {self.url}")


@pytest.fixture
def sleeps(monkeypatch):
    recorded = []

    async def fake_sleep(delay):
        recorded.append(delay)

    monkeypatch.setattr(fetch.asyncio, "sleep", fake_sleep)
    return recorded


def fake_fetch(session, url, **kwargs):
    return DummyResp(url)


def test_every_fetch_waits_the_configured_delay(sleeps):
    client = FetchClient(CrawlConfig(), fetch_func=fake_fetch)

    async def scenario():
        text = await client.fetch_text("http://a.test/")
        data = await client.fetch_bytes("http://a.test/p.jpg")
        return text, data

    text, data = asyncio.run(scenario())
    assert text == "<html></html>"
    assert data == b"<html></html>"
    assert sleeps == [0.5, 0.5]


def test_concurrent_fetches_each_wait(sleeps):
    client = FetchClient(CrawlConfig(), fetch_func=fake_fetch)

    async def scenario():
        return await asyncio.gather(*(client.fetch_text(f"http://a.test/{i}") for i in range(5)))

    asyncio.run(scenario())
    assert sleeps == [0.5] * 5


def test_zero_delay_skips_sleep(sleeps):
    client = FetchClient(CrawlConfig(request_delay=0), fetch_func=fake_fetch)
    asyncio.run(client.fetch_text("http://a.test/"))
    assert sleeps == []


def test_error_status_becomes_network_error(sleeps):
    def failing_fetch(session, url, **kwargs):
        return DummyResp(url, status_code=503)

    client = FetchClient(CrawlConfig(), fetch_func=failing_fetch)
    with pytest.raises(NetworkError) as excinfo:
        asyncio.run(client.fetch_bytes("http://a.test/p.jpg"))
    assert excinfo.value.url == "http://a.test/p.jpg"
    assert isinstance(excinfo.value.__cause__, requests.HTTPError)


def test_transport_failure_becomes_network_error(sleeps):
    def unreachable(session, url, **kwargs):
        raise requests.ConnectionError("connection refused")

    client = FetchClient(CrawlConfig(), fetch_func=unreachable)
    with pytest.raises(NetworkError) as excinfo:
        asyncio.run(client.fetch_text("http://a.test/"))
    assert excinfo.value.url == "http://a.test/"


def test_user_agent_header_is_set():
    client = FetchClient(CrawlConfig(), fetch_func=fake_fetch)
    assert client.session.headers["User-Agent"] == "imgcrawl/0.1"
    client.close()
