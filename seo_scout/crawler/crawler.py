# === FILE: seo_scout/crawler/crawler.py ===
from __future__ import annotations

import logging
import time
from typing import List, Optional, Set

from aiohttp import ClientSession

from seo_scout.analysis.analyzer import PageAnalyzer
from seo_scout.config import CrawlerConfig
from seo_scout.crawler.fetcher import Fetcher, FetchError
from seo_scout.crawler.link_extractor import extract_links
from seo_scout.crawler.models import CrawlTarget, PageError, PageRecord
from seo_scout.logger import LOGGER_NAME
from seo_scout.parser.html_parser import parse_html
from seo_scout.utils import canonical_url

__all__ = ("SEOCrawler",)


class SEOCrawler:
    """Последовательный обход в глубину в пределах домена seed URL.

    Работает через явный LIFO-стек вместо рекурсии: дочерние ссылки кладутся
    в обратном порядке, поэтому снимаются в порядке обнаружения, и порядок
    посещения совпадает с рекурсивным pre-order обходом.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        analyzer: Optional[PageAnalyzer] = None,
    ) -> None:
        self.config = config
        self.seed_url: str = canonical_url(config.seed_url)
        self.max_depth: int = config.max_depth
        self.analyzer = analyzer or PageAnalyzer(
            self.seed_url, slow_load_threshold=config.slow_load_threshold
        )
        self.visited: Set[str] = set()
        self.results: List[PageRecord] = []
        self.internal_links: Set[str] = set()
        self.session: Optional[ClientSession] = None
        self._fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> SEOCrawler:
        if self._fetcher is None:
            self.session = ClientSession(headers={"User-Agent": self.config.user_agent})
            self._fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, url: Optional[str] = None, depth: int = 0) -> List[PageRecord]:
        """Обходит сайт начиная с *url* (по умолчанию seed) и возвращает записи."""
        if self._fetcher is None:
            raise RuntimeError("Crawler used outside of 'async with'")
        self.logger.info("Старт обхода: %s (max depth %d)", self.seed_url, self.max_depth)
        start = time.monotonic()

        stack: List[CrawlTarget] = [CrawlTarget(canonical_url(url) if url else self.seed_url, depth)]
        while stack:
            target = stack.pop()
            if target.depth > self.max_depth:
                self.logger.debug("Skipping %s: depth %d exceeds %d", target.url, target.depth, self.max_depth)
                continue
            if target.url in self.visited:
                self.logger.debug("Skipping %s: already visited", target.url)
                continue
            children = await self._visit(target)
            stack.extend(reversed(children))

        duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц за %.2f с (%d ошибок)",
            len(self.results),
            duration,
            sum(1 for r in self.results if isinstance(r, PageError)),
        )
        return self.results

    async def _visit(self, target: CrawlTarget) -> List[CrawlTarget]:
        # mark before fetching so duplicates discovered meanwhile are skipped
        self.visited.add(target.url)
        self.logger.info("Crawling: %s (depth %d)", target.url, target.depth)
        try:
            page = await self._fetcher.fetch(target.url)
        except FetchError as exc:
            self.logger.warning("Error crawling %s: %s", target.url, exc)
            self.results.append(PageError(target.url, f"Failed to fetch: {exc}"))
            return []

        parsed = parse_html(page.content, target.url)
        self.results.append(await self.analyzer.analyze(target.url, page.content, parsed))

        links = extract_links(parsed.hrefs, self.seed_url)
        self.internal_links.update(links)
        return [CrawlTarget(link, target.depth + 1) for link in links if link not in self.visited]
