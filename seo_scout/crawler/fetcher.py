# seo_scout/crawler/fetcher.py
"""
Fetcher module: downloads a page body with a fixed timeout.

Redirects are followed by aiohttp; the body of the final response is returned.
Any network error, timeout or non-2xx status surfaces as :class:`FetchError`.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession, ClientTimeout

from seo_scout.config import CrawlerConfig
from seo_scout.crawler.models import PageData


class FetchError(RuntimeError):
    """Network, timeout or HTTP-level failure while fetching a page."""


class Fetcher:
    """Handles HTTP fetching with a per-request timeout."""

    def __init__(self, session: ClientSession, config: CrawlerConfig) -> None:
        self.session = session
        self.config = config
        self._timeout = ClientTimeout(total=config.fetch_timeout)

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its decoded body under the requested URL.

        Raises FetchError on failure.
        """
        try:
            async with self.session.get(
                url, timeout=self._timeout, allow_redirects=True, raise_for_status=False
            ) as resp:
                if resp.status >= 400:
                    raise FetchError(f"HTTP {resp.status} {resp.reason or ''}".rstrip())
                text = await resp.text(errors="replace")
                return PageData(url, text)
        except asyncio.TimeoutError as exc:
            raise FetchError(f"timeout after {self.config.fetch_timeout:g}s") from exc
        except ClientError as exc:
            raise FetchError(str(exc) or type(exc).__name__) from exc
