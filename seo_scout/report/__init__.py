# File: seo_scout/report/__init__.py
"""seo_scout.report: генерация отчётов (HTML и JSON) для CLI и тестов."""

from __future__ import annotations

from .html_report import markdown_to_html, render_html, render_html_string
from .json_report import render_json

__all__ = ["render_json", "render_html", "render_html_string", "markdown_to_html"]
