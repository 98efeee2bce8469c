# File: seo_scout/aggregator.py
"""seo_scout.aggregator: сводный отчёт по результатам обхода."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Sequence

from seo_scout.crawler.models import PageAnalysis, PageError, PageRecord


@dataclass(slots=True)
class CrawlReport:
    """Результаты обхода: seed URL, время генерации и записи по страницам."""

    seed_url: str
    records: List[PageRecord] = field(default_factory=list)
    generated_at: datetime = field(default_factory=datetime.now)

    @property
    def analyses(self) -> List[PageAnalysis]:
        return [r for r in self.records if isinstance(r, PageAnalysis)]

    @property
    def errors(self) -> List[PageError]:
        return [r for r in self.records if isinstance(r, PageError)]

    def summary(self) -> Dict[str, Any]:
        """Счётчики для шапки отчёта и вывода CLI."""
        analyses = self.analyses
        return {
            "pages": len(self.records),
            "analyzed": len(analyses),
            "failed": len(self.errors),
            "issues": sum(len(a.issues) for a in analyses),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed_url": self.seed_url,
            "generated_at": self.generated_at.isoformat(timespec="seconds"),
            "summary": self.summary(),
            "pages": [r.to_dict() for r in self.records],
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)


def aggregate_results(seed_url: str, records: Sequence[PageRecord]) -> CrawlReport:
    """Собирает записи обхода в CrawlReport (без копирования самих записей)."""
    return CrawlReport(seed_url=seed_url, records=list(records))


__all__ = ["CrawlReport", "aggregate_results"]
