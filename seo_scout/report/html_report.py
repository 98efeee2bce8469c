# File: seo_scout/report/html_report.py
"""seo_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import markdown
from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from seo_scout.aggregator import CrawlReport
from seo_scout.logger import logger

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def markdown_to_html(lines: Union[str, Iterable[str]]) -> Markup:
    """Converts LLM Markdown output (one string or a list of lines) to safe HTML."""
    text = lines if isinstance(lines, str) else "\n".join(lines)
    if not text.strip():
        return Markup("")
    return Markup(markdown.markdown(text, extensions=["extra", "sane_lists"]))


def pretty_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, indent=2, default=str)


def _environment(template_dir: Union[Path, str]) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    env.filters["markdown"] = markdown_to_html
    env.filters["pretty_json"] = pretty_json
    return env


def render_html_string(report: CrawlReport, template_dir: Optional[Union[Path, str]] = None) -> str:
    """Рендерит HTML-отчёт в строку."""
    env = _environment(template_dir or DEFAULT_TEMPLATE_DIR)
    template = env.get_template(TEMPLATE_NAME)
    context: dict[str, Any] = {
        "seed_url": report.seed_url,
        "generated_at": report.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
        "summary": report.summary(),
        "pages": [r.to_dict() for r in report.records],
    }
    return template.render(**context)


def render_html(
    report: CrawlReport,
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        report: объект CrawlReport.
        output_path: путь к итоговому HTML-файлу.
        template_dir: директория с Jinja2-шаблонами (по умолчанию встроенная).

    Returns:
        Path до сохранённого HTML-файла.

    Пример:
    ```python
    from seo_scout.report.html_report import render_html
    html_path = render_html(report, output_path='reports/seo_report.html')
    ```
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_html_string(report, template_dir), encoding="utf-8")
    logger.info("SEO analysis report saved to %s", output_path)
    return output_path
