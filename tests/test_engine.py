# File: tests/test_engine.py
from __future__ import annotations

import pytest

from conftest import FakeOracle, FakeProbe, make_page, serve_site
from seo_scout.config import CrawlerConfig
from seo_scout.engine import Engine
from seo_scout.sitemap import parse_sitemap


@pytest.mark.asyncio()
async def test_engine_end_to_end(unused_tcp_port: int, tmp_path):
    site = {
        "/": make_page(links=["/blog", "/missing"]),
        "/blog": make_page(links=["/blog/first-post"], h1s=()),
        "/blog/first-post": make_page(viewport=False),
    }
    probe = FakeProbe(load_time=3.5)
    async for base in serve_site(site, unused_tcp_port):
        config = CrawlerConfig(base_url=base, max_depth=2, fetch_timeout=2.0)
        engine = Engine(config, probe=probe, oracle=FakeOracle())
        report = await engine.crawl()

    assert [r.url for r in report.records] == [
        base,
        f"{base}blog",
        f"{base}blog/first-post",
        f"{base}missing",
    ]
    assert report.summary() == {"pages": 4, "analyzed": 3, "failed": 1, "issues": 5}

    entries = engine.sitemap_entries(report)
    assert [(e.url, e.priority) for e in entries] == [
        (base, 1.0),
        (f"{base}blog", 0.8),
        (f"{base}blog/first-post", 0.6),
    ]

    artifacts = engine.write_artifacts(
        report,
        sitemap_path=tmp_path / "sitemap.xml",
        html_path=tmp_path / "seo_report.html",
    )
    assert artifacts.json_report is None
    assert parse_sitemap(artifacts.sitemap.read_bytes()) == [e.url for e in entries]
    html = artifacts.html_report.read_text(encoding="utf-8")
    assert "Page load time too slow (3.50s)" in html
    assert "Failed to fetch: HTTP 404" in html
