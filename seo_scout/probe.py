# File: seo_scout/probe.py
"""seo_scout.probe: замер скорости загрузки страницы в headless Chromium (Playwright)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from playwright.async_api import Browser, Error as PlaywrightError, Playwright, async_playwright

from seo_scout.config import CrawlerConfig
from seo_scout.crawler.models import LargeResource, PerformanceReport
from seo_scout.logger import logger

__all__ = ["PerformanceProbe", "ProbeError"]

# Executed in the page after navigation; values are raw milliseconds / bytes.
_TIMING_JS = """
() => {
  const t = performance.timing;
  const viewport = document.querySelector('meta[name="viewport"][content*="width=device-width"]');
  return {
    navigationStart: t.navigationStart,
    loadEventEnd: t.loadEventEnd,
    domainLookupStart: t.domainLookupStart,
    domainLookupEnd: t.domainLookupEnd,
    connectStart: t.connectStart,
    connectEnd: t.connectEnd,
    requestStart: t.requestStart,
    responseEnd: t.responseEnd,
    domContentLoadedEventEnd: t.domContentLoadedEventEnd,
    resources: performance.getEntriesByType('resource').map(r => ({
      name: r.name, transferSize: r.transferSize || 0
    })),
    mobileFriendly: !!viewport,
  };
}
"""


class ProbeError(RuntimeError):
    """Navigation or measurement failure in the headless browser."""


class PerformanceProbe:
    """Асинхронный контекст: один браузер на весь обход, новая вкладка на каждый замер."""

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def __aenter__(self) -> PerformanceProbe:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self._browser is not None:
            await self._browser.close()
            self._browser = None
        if self._playwright is not None:
            await self._playwright.stop()
            self._playwright = None

    async def _ensure_browser(self) -> Browser:
        if self._browser is None:
            if self._playwright is None:
                self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(headless=True)
        return self._browser

    async def measure(self, url: str) -> PerformanceReport:
        """Load *url* and return its navigation timing. Raises ProbeError."""
        try:
            browser = await self._ensure_browser()
            page = await browser.new_page(user_agent=self.config.user_agent)
            try:
                await page.goto(
                    url,
                    wait_until="networkidle",
                    timeout=self.config.probe_timeout * 1000,
                )
                raw: Dict[str, Any] = await page.evaluate(_TIMING_JS)
            finally:
                await page.close()
        except PlaywrightError as exc:
            logger.warning("Performance probe failed for %s: %s", url, exc.message)
            raise ProbeError(exc.message) from exc
        return self._build_report(raw)

    def _build_report(self, raw: Dict[str, Any]) -> PerformanceReport:
        def span(start: str, end: str) -> float:
            return (raw[end] - raw[start]) / 1000

        threshold = self.config.large_resource_kb * 1000
        large = tuple(
            LargeResource(name=r["name"], size_kb=round(r["transferSize"] / 1024, 2))
            for r in raw.get("resources", [])
            if r["transferSize"] > threshold
        )
        return PerformanceReport(
            load_time_seconds=span("navigationStart", "loadEventEnd"),
            dns_lookup=span("domainLookupStart", "domainLookupEnd"),
            tcp_connect=span("connectStart", "connectEnd"),
            request_time=span("requestStart", "responseEnd"),
            dom_content_loaded=span("navigationStart", "domContentLoadedEventEnd"),
            large_resources=large,
            mobile_friendly=bool(raw.get("mobileFriendly")),
        )
