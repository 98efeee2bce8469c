# seo_scout/analysis/analyzer.py
"""
Page rule engine.

:class:`PageAnalyzer` turns a parsed page into a :class:`PageAnalysis`:
fixed on-page rules first, then the performance probe, then rule-based and
oracle suggestions.  Probe and oracle failures are absorbed here and show up
in the record (an issue, a fallback suggestion) instead of being raised.
"""
from __future__ import annotations

import re
from typing import List, Optional, Protocol, Sequence, Tuple, Union

from seo_scout.analysis.issues import Issue, IssueKind
from seo_scout.analysis.suggestions import rule_based_suggestions
from seo_scout.crawler.link_extractor import count_internal_links
from seo_scout.crawler.models import (
    UNAVAILABLE,
    PageAnalysis,
    PageMetrics,
    PerformanceReport,
    Suggestions,
)
from seo_scout.logger import logger
from seo_scout.oracle import OracleError
from seo_scout.parser.html_parser import ParsedPage, parse_html
from seo_scout.probe import ProbeError

__all__ = ["PageAnalyzer", "count_words", "ORACLE_FALLBACK"]

TITLE_MIN, TITLE_MAX = 30, 60
META_MIN, META_MAX = 70, 160
MIN_WORDS = 300
DEFAULT_SLOW_LOAD = 3.0

ORACLE_FALLBACK = "Could not generate advanced suggestions: suggestion service unavailable."

_WS_RE = re.compile(r"\s+")


class Probe(Protocol):
    async def measure(self, url: str) -> PerformanceReport: ...


class Oracle(Protocol):
    async def suggest(self, url: str, issues: Sequence[str], metrics: dict) -> List[str]: ...


def count_words(text: str) -> int:
    """Collapse whitespace, trim and split on single spaces.

    An empty text still counts as one word (``"".split(" ") == [""]``).
    """
    return len(_WS_RE.sub(" ", text).strip().split(" "))


class PageAnalyzer:
    """Evaluates one page against the fixed SEO rule set."""

    def __init__(
        self,
        seed_url: str,
        probe: Optional[Probe] = None,
        oracle: Optional[Oracle] = None,
        slow_load_threshold: float = DEFAULT_SLOW_LOAD,
    ) -> None:
        self.seed_url = seed_url
        self.probe = probe
        self.oracle = oracle
        self.slow_load_threshold = slow_load_threshold

    async def analyze(
        self, url: str, raw_html: str, page: Optional[ParsedPage] = None
    ) -> PageAnalysis:
        if page is None:
            page = parse_html(raw_html, url)

        issues = self._content_issues(page)
        load_time, detail, perf_issue = await self._measure(url)
        if perf_issue is not None:
            issues.append(perf_issue)

        metrics = PageMetrics(
            title=page.title,
            meta_description=page.meta_description,
            h1_text=page.h1_texts[0] if page.h1_texts else "",
            word_count=count_words(page.text),
            internal_link_count=count_internal_links(page.hrefs, self.seed_url),
            load_time_seconds=load_time,
            performance_detail=detail,
        )
        messages = tuple(issue.message for issue in issues)
        suggestions = Suggestions(
            rule_based=tuple(rule_based_suggestions(issues, metrics)),
            generated=tuple(await self._generated(url, messages, metrics)),
        )
        logger.info("Analyzed %s: %d issue(s)", url, len(messages))
        return PageAnalysis(url=url, issues=messages, metrics=metrics, suggestions=suggestions)

    # ------------------------------------------------------------------ rules

    def _content_issues(self, page: ParsedPage) -> List[Issue]:
        issues: List[Issue] = []

        title_len = len(page.title)
        if not page.title:
            issues.append(Issue(IssueKind.MISSING_TITLE))
        elif title_len > TITLE_MAX:
            issues.append(Issue(IssueKind.TITLE_TOO_LONG, title_len))
        elif title_len < TITLE_MIN:
            issues.append(Issue(IssueKind.TITLE_TOO_SHORT, title_len))

        meta_len = len(page.meta_description)
        if not page.meta_description:
            issues.append(Issue(IssueKind.MISSING_META_DESCRIPTION))
        elif meta_len > META_MAX:
            issues.append(Issue(IssueKind.META_DESCRIPTION_TOO_LONG, meta_len))
        elif meta_len < META_MIN:
            issues.append(Issue(IssueKind.META_DESCRIPTION_TOO_SHORT, meta_len))

        if page.h1_count == 0:
            issues.append(Issue(IssueKind.NO_H1))
        elif page.h1_count > 1:
            issues.append(Issue(IssueKind.MULTIPLE_H1, page.h1_count))

        words = count_words(page.text)
        if words < MIN_WORDS:
            issues.append(Issue(IssueKind.LOW_WORD_COUNT, words))

        missing_alt = page.images_missing_alt
        if missing_alt > 0:
            issues.append(Issue(IssueKind.IMAGES_MISSING_ALT, missing_alt))

        if not page.has_mobile_viewport:
            issues.append(Issue(IssueKind.NOT_MOBILE_FRIENDLY))

        return issues

    async def _measure(
        self, url: str
    ) -> Tuple[Union[float, str], Optional[PerformanceReport], Optional[Issue]]:
        if self.probe is None:
            return UNAVAILABLE, None, None
        try:
            report = await self.probe.measure(url)
        except ProbeError as exc:
            return UNAVAILABLE, None, Issue(IssueKind.PERFORMANCE_FAILED, str(exc))
        # threshold is checked on the raw value, rounding is for display only
        load_time = round(report.load_time_seconds, 2)
        if report.load_time_seconds > self.slow_load_threshold:
            return load_time, report, Issue(IssueKind.SLOW_LOAD, report.load_time_seconds)
        return load_time, report, None

    # ------------------------------------------------------------ suggestions

    async def _generated(self, url: str, issues: Sequence[str], metrics: PageMetrics) -> List[str]:
        if self.oracle is None:
            return []
        try:
            generated = await self.oracle.suggest(url, list(issues), metrics.to_dict())
        except OracleError as exc:
            logger.warning("LLM suggestion error for %s: %s", url, exc)
            return [ORACLE_FALLBACK]
        lines = [s for s in generated or [] if isinstance(s, str) and s.strip()]
        if not lines:
            logger.warning("LLM returned no usable suggestions for %s", url)
            return [ORACLE_FALLBACK]
        return lines
