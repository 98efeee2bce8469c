# seo_scout/crawler/models.py
"""
Data models for the SEOScout crawler and page analyzer.

Records are frozen once built: the crawler appends them to its result list and
nothing downstream (sitemap, reports) mutates them.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Literal, Optional, Tuple, Union

UNAVAILABLE: Literal["unavailable"] = "unavailable"


@dataclass(frozen=True, slots=True)
class CrawlTarget:
    """A discovered URL waiting in the work-list, with its crawl depth."""

    url: str
    depth: int


@dataclass(slots=True)
class PageData:
    """Holds the final URL and HTML body of a fetched page."""

    url: str
    content: str


@dataclass(frozen=True, slots=True)
class LargeResource:
    name: str
    size_kb: float


@dataclass(frozen=True, slots=True)
class PerformanceReport:
    """Navigation timing of one page load, in seconds."""

    load_time_seconds: float
    dns_lookup: float
    tcp_connect: float
    request_time: float
    dom_content_loaded: float
    large_resources: Tuple[LargeResource, ...] = ()
    mobile_friendly: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["large_resources"] = [asdict(r) for r in self.large_resources]
        return data


@dataclass(frozen=True, slots=True)
class PageMetrics:
    title: str = ""
    meta_description: str = ""
    h1_text: str = ""
    word_count: int = 0
    internal_link_count: int = 0
    load_time_seconds: Union[float, str] = UNAVAILABLE
    performance_detail: Optional[PerformanceReport] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "meta_description": self.meta_description,
            "h1_text": self.h1_text,
            "word_count": self.word_count,
            "internal_link_count": self.internal_link_count,
            "load_time_seconds": self.load_time_seconds,
            "performance_detail": (
                self.performance_detail.to_dict() if self.performance_detail else {}
            ),
        }


@dataclass(frozen=True, slots=True)
class Suggestions:
    rule_based: Tuple[str, ...] = ()
    generated: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"rule_based": list(self.rule_based), "generated": list(self.generated)}


@dataclass(frozen=True, slots=True)
class PageAnalysis:
    """Successful analysis of one page."""

    url: str
    issues: Tuple[str, ...] = ()
    metrics: PageMetrics = field(default_factory=PageMetrics)
    suggestions: Suggestions = field(default_factory=Suggestions)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "issues": list(self.issues),
            "metrics": self.metrics.to_dict(),
            "suggestions": self.suggestions.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class PageError:
    """A page that could not be fetched."""

    url: str
    error: str

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "error": self.error}


PageRecord = Union[PageAnalysis, PageError]

__all__ = [
    "UNAVAILABLE",
    "CrawlTarget",
    "PageData",
    "LargeResource",
    "PerformanceReport",
    "PageMetrics",
    "Suggestions",
    "PageAnalysis",
    "PageError",
    "PageRecord",
]
