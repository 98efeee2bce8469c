# === FILE: seo_scout/parser/html_parser.py ===
"""HTML parsing utilities for SEOScout.

:func:`parse_html` turns raw markup into a :class:`ParsedPage`, the read-only
DOM snapshot the analyzer and the crawler work from.  The rule engine never
touches markup directly; everything it needs is exposed here:

* title: document ``<title>`` text, ``""`` if absent.
* meta_description: ``content`` of ``<meta name="description">``.
* h1_texts: text of every ``<h1>`` in document order.
* text: visible body text (``<script>``, ``<style>`` etc. removed).
* hrefs: raw ``href`` values of ``<a>`` tags, document order.
* img_alts: the ``alt`` attribute of every ``<img>`` (``None`` when missing).
* viewport: ``content`` of ``<meta name="viewport">`` or ``None``.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

__all__: Sequence[str] = ("ParsedPage", "parse_html")

_INVISIBLE_TAGS = ("script", "style", "noscript", "template")


@dataclass(slots=True)
class ParsedPage:
    """Lightweight representation of an HTML page."""

    url: str
    title: str = ""
    meta_description: str = ""
    h1_texts: list[str] = field(default_factory=list)
    text: str = ""
    hrefs: list[str] = field(default_factory=list)
    img_alts: list[Optional[str]] = field(default_factory=list)
    viewport: Optional[str] = None

    # Convenience helpers ---------------------------------------------------
    @property
    def h1_count(self) -> int:
        return len(self.h1_texts)

    @property
    def images_missing_alt(self) -> int:
        return sum(1 for alt in self.img_alts if alt is None)

    @property
    def has_mobile_viewport(self) -> bool:
        return self.viewport is not None and "width=device-width" in self.viewport.replace(" ", "")


# ---------------------------------------------------------------------------
# Public function
# ---------------------------------------------------------------------------


def _meta_content(soup: BeautifulSoup, name: str) -> Optional[str]:
    for tag in soup.find_all("meta"):
        if not isinstance(tag, Tag):
            continue
        if str(tag.get("name", "")).strip().lower() == name:
            content = tag.get("content")
            return content if isinstance(content, str) else ""
    return None


def parse_html(html: str, url: str = "") -> ParsedPage:
    """Parse raw HTML markup fetched from *url*."""
    soup = BeautifulSoup(html, "html.parser")

    title_tag = soup.find("title")
    title = title_tag.get_text(strip=True) if title_tag else ""

    meta_description = (_meta_content(soup, "description") or "").strip()
    viewport = _meta_content(soup, "viewport")

    h1_texts = [h1.get_text(" ", strip=True) for h1 in soup.find_all("h1")]

    hrefs: list[str] = []
    for tag in soup.find_all("a", href=True):
        href = tag.get("href")
        if isinstance(href, str):
            hrefs.append(href)

    img_alts: list[Optional[str]] = []
    for img in soup.find_all("img"):
        alt = img.get("alt")
        img_alts.append(alt if isinstance(alt, str) else None)

    # Visible text (skip <script>, <style>, etc.)
    body = soup.body
    if body is None:
        # no <body>: drop head-only content so the title is not counted as text
        body = soup
        for name in ("head", "title", "meta", "link", "base"):
            for element in body.find_all(name):
                element.decompose()
    for name in _INVISIBLE_TAGS:
        for element in body.find_all(name):
            element.decompose()
    text = body.get_text(" ")

    return ParsedPage(
        url=url,
        title=title,
        meta_description=meta_description,
        h1_texts=h1_texts,
        text=text,
        hrefs=hrefs,
        img_alts=img_alts,
        viewport=viewport,
    )
