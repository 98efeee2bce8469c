# seo_scout/analysis/issues.py
"""
Issue kinds produced by the page rule engine.

An :class:`Issue` is a tagged variant: its :class:`IssueKind` selects the
suggestion template, the attached ``value`` carries the measured quantity
(length, count, seconds, failure reason) used in the rendered message.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class IssueKind(str, Enum):
    MISSING_TITLE = "missing_title"
    TITLE_TOO_LONG = "title_too_long"
    TITLE_TOO_SHORT = "title_too_short"
    MISSING_META_DESCRIPTION = "missing_meta_description"
    META_DESCRIPTION_TOO_LONG = "meta_description_too_long"
    META_DESCRIPTION_TOO_SHORT = "meta_description_too_short"
    NO_H1 = "no_h1"
    MULTIPLE_H1 = "multiple_h1"
    LOW_WORD_COUNT = "low_word_count"
    IMAGES_MISSING_ALT = "images_missing_alt"
    NOT_MOBILE_FRIENDLY = "not_mobile_friendly"
    SLOW_LOAD = "slow_load"
    PERFORMANCE_FAILED = "performance_failed"


_MESSAGES = {
    IssueKind.MISSING_TITLE: "Missing title tag",
    IssueKind.TITLE_TOO_LONG: "Title too long ({value} chars)",
    IssueKind.TITLE_TOO_SHORT: "Title too short ({value} chars)",
    IssueKind.MISSING_META_DESCRIPTION: "Missing meta description",
    IssueKind.META_DESCRIPTION_TOO_LONG: "Meta description too long ({value} chars)",
    IssueKind.META_DESCRIPTION_TOO_SHORT: "Meta description too short ({value} chars)",
    IssueKind.NO_H1: "No H1 tag found",
    IssueKind.MULTIPLE_H1: "Multiple H1 tags found ({value})",
    IssueKind.LOW_WORD_COUNT: "Low word count ({value})",
    IssueKind.IMAGES_MISSING_ALT: "{value} image(s) missing alt text",
    IssueKind.NOT_MOBILE_FRIENDLY: "Not mobile-friendly",
    IssueKind.SLOW_LOAD: "Page load time too slow ({value:.2f}s)",
    IssueKind.PERFORMANCE_FAILED: "performance analysis failed: {value}",
}


@dataclass(frozen=True, slots=True)
class Issue:
    kind: IssueKind
    value: Union[int, float, str, None] = None

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind].format(value=self.value)

    def __str__(self) -> str:
        return self.message


__all__ = ["IssueKind", "Issue"]
