# File: seo_scout/sitemap.py
"""seo_scout.sitemap: приоритеты по глубине пути и запись/чтение sitemap.xml."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Iterable, List, Optional, Union

from lxml import etree

from seo_scout.crawler.models import PageError, PageRecord
from seo_scout.logger import logger
from seo_scout.utils import path_segments

__all__ = [
    "SitemapEntry",
    "url_depth",
    "priority_for_depth",
    "build_priorities",
    "render_sitemap",
    "write_sitemap",
    "parse_sitemap",
]

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    url: str
    last_modified: date
    priority: float


def url_depth(url: str, seed_url: str) -> int:
    """Segment depth of *url* relative to *seed_url*.

    Depends only on URL structure, not on how deep the crawler went to find it.
    """
    return len(path_segments(url)) - len(path_segments(seed_url))


def priority_for_depth(depth: int) -> float:
    """0 → 1.0, 1 → 0.8, anything else (deeper or above the seed) → 0.6."""
    if depth == 0:
        return 1.0
    if depth == 1:
        return 0.8
    return 0.6


def build_priorities(
    records: Iterable[PageRecord], seed_url: str, lastmod: Optional[date] = None
) -> List[SitemapEntry]:
    """Одна запись на каждую успешно проанализированную страницу, в порядке обхода."""
    lastmod = lastmod or date.today()
    return [
        SitemapEntry(r.url, lastmod, priority_for_depth(url_depth(r.url, seed_url)))
        for r in records
        if not isinstance(r, PageError)
    ]


def render_sitemap(entries: Iterable[SitemapEntry]) -> bytes:
    """Сериализует записи в XML по схеме sitemaps.org 0.9."""
    urlset = etree.Element(f"{{{SITEMAP_NS}}}urlset", nsmap={None: SITEMAP_NS})
    for entry in entries:
        node = etree.SubElement(urlset, f"{{{SITEMAP_NS}}}url")
        etree.SubElement(node, f"{{{SITEMAP_NS}}}loc").text = entry.url
        etree.SubElement(node, f"{{{SITEMAP_NS}}}lastmod").text = entry.last_modified.isoformat()
        etree.SubElement(node, f"{{{SITEMAP_NS}}}priority").text = f"{entry.priority:.1f}"
    return etree.tostring(urlset, xml_declaration=True, encoding="UTF-8", pretty_print=True)


def write_sitemap(entries: Iterable[SitemapEntry], output_path: Union[str, Path]) -> Path:
    """Записывает sitemap в файл и возвращает его путь."""
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(render_sitemap(entries))
    logger.info("Sitemap saved to %s", output)
    return output


def parse_sitemap(xml_content: Union[str, bytes]) -> List[str]:
    """Разбирает sitemap и возвращает список URL из тегов <loc>."""
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
    parser = etree.XMLParser(ns_clean=True, recover=True)
    root = etree.fromstring(xml_content, parser=parser)
    locs = root.findall(".//{*}loc")
    return [loc.text.strip() for loc in locs if loc.text]
