# seo_scout/crawler/link_extractor.py
"""
Link extraction for SEOScout.

Links are resolved against the seed URL (not the page URL) and kept only when
their host equals the seed host and they carry no fragment marker.
"""
from __future__ import annotations

from typing import Iterable, List

from seo_scout.logger import logger
from seo_scout.utils import extract_host, resolve_link


def extract_links(hrefs: Iterable[str], seed_url: str) -> List[str]:
    """
    Return internal absolute URLs from raw *hrefs*, deduplicated, in discovery order.

    Malformed hrefs are dropped with a debug message.
    """
    seed_host = extract_host(seed_url)
    links: List[str] = []
    seen: set[str] = set()
    for href in hrefs:
        try:
            absolute = resolve_link(href, seed_url)
        except ValueError:
            logger.debug("Invalid URL skipped: %s", href)
            continue
        # urljoin drops an empty fragment, so check the raw href as well
        if extract_host(absolute) != seed_host or "#" in href or "#" in absolute:
            continue
        if absolute not in seen:
            seen.add(absolute)
            links.append(absolute)
    return links


def count_internal_links(hrefs: Iterable[str], seed_url: str) -> int:
    """Count hrefs that resolve to the seed host (duplicates and fragments included)."""
    seed_host = extract_host(seed_url)
    count = 0
    for href in hrefs:
        try:
            if extract_host(resolve_link(href, seed_url)) == seed_host:
                count += 1
        except ValueError:
            continue
    return count
