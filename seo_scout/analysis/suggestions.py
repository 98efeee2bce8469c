# seo_scout/analysis/suggestions.py
"""Fixed remediation templates keyed on :class:`IssueKind`."""
from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from seo_scout.analysis.issues import Issue, IssueKind
from seo_scout.crawler.models import PageMetrics

_Template = Callable[[Issue, PageMetrics], str]

_TEMPLATES: Dict[IssueKind, _Template] = {
    IssueKind.MISSING_TITLE: lambda issue, m: (
        "Craft a unique <title> (50-60 chars) incorporating your primary keyword "
        "to boost relevance."
    ),
    IssueKind.TITLE_TOO_LONG: lambda issue, m: (
        "Trim the title to 60 chars max, prioritizing your main keyword "
        f'(e.g., "{m.title[:57]}...").'
    ),
    IssueKind.TITLE_TOO_SHORT: lambda issue, m: (
        "Expand the title to 50-60 chars with a secondary keyword to improve ranking potential."
    ),
    IssueKind.MISSING_META_DESCRIPTION: lambda issue, m: (
        "Add a compelling meta description (150-160 chars) with a call-to-action "
        "and target keywords."
    ),
    IssueKind.NO_H1: lambda issue, m: (
        "Add a single H1 with your primary keyword, aligning with user intent."
    ),
    IssueKind.SLOW_LOAD: lambda issue, m: (
        "Optimize assets: compress images, lazy-load offscreen content, and leverage "
        f"browser caching (current: {m.load_time_seconds}s)."
    ),
    IssueKind.NOT_MOBILE_FRIENDLY: lambda issue, m: (
        'Add `<meta name="viewport" content="width=device-width, initial-scale=1">` '
        "and test responsiveness across devices."
    ),
}


def rule_based_suggestions(issues: Iterable[Issue], metrics: PageMetrics) -> List[str]:
    """One suggestion per issue that has a template, in issue order."""
    suggestions: List[str] = []
    for issue in issues:
        template = _TEMPLATES.get(issue.kind)
        if template is not None:
            suggestions.append(template(issue, metrics))
    return suggestions


__all__ = ["rule_based_suggestions"]
