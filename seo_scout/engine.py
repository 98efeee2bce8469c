# File: seo_scout/engine.py
"""seo_scout.engine: Orchestration layer для запуска обхода, построения sitemap и отчётов."""

from __future__ import annotations

import asyncio
from contextlib import AsyncExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from seo_scout.aggregator import CrawlReport, aggregate_results
from seo_scout.analysis.analyzer import Oracle, PageAnalyzer, Probe
from seo_scout.config import CrawlerConfig
from seo_scout.crawler.crawler import SEOCrawler
from seo_scout.logger import logger
from seo_scout.oracle import SuggestionOracle
from seo_scout.probe import PerformanceProbe
from seo_scout.report.html_report import render_html
from seo_scout.report.json_report import render_json
from seo_scout.sitemap import SitemapEntry, build_priorities, write_sitemap

__all__ = ["Engine", "Artifacts"]


@dataclass(slots=True)
class Artifacts:
    """Пути к файлам, записанным после обхода."""

    sitemap: Optional[Path] = None
    html_report: Optional[Path] = None
    json_report: Optional[Path] = None


class Engine:
    """Фасад для CLI и тестов: обход, sitemap и отчёты."""

    def __init__(
        self,
        config: CrawlerConfig,
        *,
        probe: Optional[Probe] = None,
        oracle: Optional[Oracle] = None,
    ) -> None:
        """Коллабораторы по умолчанию создаются из config (enable_probe / enable_oracle)."""
        self.config = config
        self._probe = probe
        self._oracle = oracle

    async def crawl(self) -> CrawlReport:
        """Асинхронный обход сайта с последовательным анализом страниц."""
        async with AsyncExitStack() as stack:
            probe = self._probe
            if probe is None and self.config.enable_probe:
                probe = await stack.enter_async_context(PerformanceProbe(self.config))
            oracle = self._oracle
            if oracle is None and self.config.enable_oracle:
                oracle = SuggestionOracle(self.config)

            analyzer = PageAnalyzer(
                self.config.seed_url,
                probe=probe,
                oracle=oracle,
                slow_load_threshold=self.config.slow_load_threshold,
            )
            crawler = await stack.enter_async_context(SEOCrawler(self.config, analyzer))
            records = await crawler.crawl()
        return aggregate_results(self.config.seed_url, records)

    def start_scan(self) -> CrawlReport:
        """Синхронная обёртка над crawl() для CLI."""
        logger.info("Starting crawl…")
        try:
            return asyncio.run(self.crawl())
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise

    def sitemap_entries(self, report: CrawlReport) -> List[SitemapEntry]:
        return build_priorities(report.records, self.config.seed_url)

    def write_artifacts(
        self,
        report: CrawlReport,
        *,
        sitemap_path: Optional[Union[str, Path]] = None,
        html_path: Optional[Union[str, Path]] = None,
        json_path: Optional[Union[str, Path]] = None,
        template_dir: Optional[Union[str, Path]] = None,
    ) -> Artifacts:
        """Пишет sitemap и отчёты; пропущенные пути не создаются."""
        artifacts = Artifacts()
        if sitemap_path is not None:
            artifacts.sitemap = write_sitemap(self.sitemap_entries(report), sitemap_path)
        if html_path is not None:
            artifacts.html_report = render_html(report, html_path, template_dir)
        if json_path is not None:
            artifacts.json_report = render_json(report, json_path)
        return artifacts
