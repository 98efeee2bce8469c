"""seo_scout.analysis: on-page rule engine and suggestion dispatch."""

from .analyzer import ORACLE_FALLBACK, PageAnalyzer, count_words
from .issues import Issue, IssueKind

__all__ = ["PageAnalyzer", "count_words", "ORACLE_FALLBACK", "Issue", "IssueKind"]
