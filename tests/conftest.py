# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Dict, List, Optional, Sequence

import pytest
from aiohttp import web

from seo_scout.config import CrawlerConfig
from seo_scout.crawler.models import PerformanceReport
from seo_scout.logger import init_logging
from seo_scout.oracle import OracleError
from seo_scout.probe import ProbeError

GOOD_TITLE = "Handmade Oak Furniture for Every Room at Home"  # 45 chars
GOOD_META = (
    "Solid oak tables, chairs and shelves built to order in our workshop. "
    "Free delivery on orders over 500."
)


def make_page(
    *,
    title: Optional[str] = GOOD_TITLE,
    meta: Optional[str] = GOOD_META,
    h1s: Sequence[str] = ("Oak furniture",),
    words: int = 320,
    links: Sequence[str] = (),
    imgs: Sequence[Optional[str]] = (),
    viewport: bool = True,
) -> str:
    """Build an HTML document; ``None`` for title/meta leaves the tag out."""
    head: List[str] = []
    if title is not None:
        head.append(f"<title>{title}</title>")
    if meta is not None:
        head.append(f'<meta name="description" content="{meta}">')
    if viewport:
        head.append('<meta name="viewport" content="width=device-width, initial-scale=1">')
    body: List[str] = [f"<h1>{h}</h1>" for h in h1s]
    if words:
        body.append("<p>" + " ".join(["word"] * words) + "</p>")
    body.extend(f'<a href="{href}"></a>' for href in links)
    for alt in imgs:
        body.append('<img src="i.png">' if alt is None else f'<img src="i.png" alt="{alt}">')
    return f"<html><head>{''.join(head)}</head><body>{''.join(body)}</body></html>"


class FakeProbe:
    """Returns a fixed load time, or raises ProbeError when *error* is set."""

    def __init__(self, load_time: float = 1.25, error: Optional[str] = None) -> None:
        self.load_time = load_time
        self.error = error
        self.calls: List[str] = []

    async def measure(self, url: str) -> PerformanceReport:
        self.calls.append(url)
        if self.error:
            raise ProbeError(self.error)
        return PerformanceReport(
            load_time_seconds=self.load_time,
            dns_lookup=0.01,
            tcp_connect=0.02,
            request_time=0.1,
            dom_content_loaded=self.load_time / 2,
            mobile_friendly=True,
        )


class FakeOracle:
    """Returns canned lines, or raises OracleError when *error* is set."""

    def __init__(self, lines: Optional[List[str]] = None, error: Optional[str] = None) -> None:
        self.lines = ["- Use **descriptive** anchors"] if lines is None else lines
        self.error = error
        self.calls: List[Dict] = []

    async def suggest(self, url, issues, metrics) -> List[str]:
        self.calls.append({"url": url, "issues": list(issues), "metrics": metrics})
        if self.error:
            raise OracleError(self.error)
        return list(self.lines)


async def serve_site(pages: Dict[str, object], port: int) -> AsyncIterator[str]:
    """Serve *pages* (path → HTML, or an aiohttp handler) and yield the base URL."""
    app = web.Application()
    for path, page in pages.items():
        if callable(page):
            app.router.add_get(path, page)
        else:
            app.router.add_get(path, _static(str(page)))
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", port)
    await site.start()
    try:
        yield f"http://127.0.0.1:{port}/"
    finally:
        await runner.cleanup()


def _static(html: str):
    async def handler(_request):
        return web.Response(text=html, content_type="text/html")

    return handler


@pytest.fixture(autouse=True)
def fresh_logging():
    """CLI tests rebind the logger to CliRunner streams; restore it per test."""
    init_logging(level="DEBUG")
    yield


@pytest.fixture()
def basic_config() -> CrawlerConfig:
    """Offline config: no browser, no LLM."""
    return CrawlerConfig(
        base_url="https://example.com",
        max_depth=1,
        fetch_timeout=2.0,
        user_agent="TestAgent/1.0",
        enable_probe=False,
        enable_oracle=False,
    )
