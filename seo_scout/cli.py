# === FILE: seo_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска SEOScout через командную строку.

Использование:
  seo-scout URL [MAX_DEPTH] [OPTIONS]

Аргументы:
  URL                 Seed URL (абсолютный http/https); обход ограничен его хостом
  MAX_DEPTH           Максимальная глубина обхода (default: 3)

Опции:
  --config PATH       YAML/JSON конфиг (значения из командной строки важнее)
  --sitemap PATH      Куда записать sitemap.xml (default: sitemap.xml)
  --report PATH       Куда записать HTML-отчёт (default: seo_report.html)
  --json PATH         Дополнительно сохранить JSON-отчёт
  --no-probe          Не замерять скорость загрузки в браузере
  --no-llm            Не запрашивать подсказки у LLM
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --version, -v       Показать версию SEOScout

Пример:
  seo-scout https://example.com 2 --json seo_report.json
"""
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from pydantic import ValidationError

from seo_scout import __version__
from seo_scout.config import load_config
from seo_scout.engine import Engine
from seo_scout.logger import init_logging
from seo_scout.utils import is_absolute_url

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _validate_url(ctx, param, value):
    if not is_absolute_url(value):
        raise click.BadParameter(
            'Invalid URL provided. Please use a valid URL (e.g., https://example.com)'
        )
    return value


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SEOScout, version %(version)s')
@click.argument('url', callback=_validate_url)
@click.argument('max_depth', type=click.IntRange(min=0), required=False)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--sitemap', 'sitemap_path',
    default='sitemap.xml', show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь для sitemap.xml'
)
@click.option(
    '--report', 'report_path',
    default='seo_report.html', show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь для HTML-отчёта'
)
@click.option(
    '--json', '-j', 'json_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--no-probe', is_flag=True, help='Не замерять скорость загрузки страниц')
@click.option('--no-llm', is_flag=True, help='Не запрашивать подсказки у LLM')
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
def cli(url, max_depth, config_path, sitemap_path, report_path, json_path,
        no_probe, no_llm, log_level, log_file):
    """Обойти сайт начиная с URL и сформировать SEO-отчёт и sitemap."""
    load_dotenv()
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    overrides = {'base_url': url, 'max_depth': max_depth}
    if no_probe:
        overrides['enable_probe'] = False
    if no_llm:
        overrides['enable_oracle'] = False
    try:
        cfg = load_config(config_path, **overrides)
    except (ValidationError, ValueError, TypeError, FileNotFoundError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    click.echo(f'Crawling {cfg.seed_url} (max depth {cfg.max_depth})')
    engine = Engine(cfg)
    try:
        report = engine.start_scan()
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    try:
        artifacts = engine.write_artifacts(
            report,
            sitemap_path=sitemap_path,
            html_path=report_path,
            json_path=json_path,
        )
    except OSError as e:
        print_error(f'Ошибка при сохранении отчётов: {e}')

    summary = report.summary()
    click.echo(
        f"Pages: {summary['pages']} (analyzed {summary['analyzed']}, failed {summary['failed']}), "
        f"issues: {summary['issues']}"
    )
    click.echo(f'Sitemap: {artifacts.sitemap}')
    click.echo(f'HTML report: {artifacts.html_report}')
    if artifacts.json_report:
        click.echo(f'JSON report: {artifacts.json_report}')


if __name__ == "__main__":
    cli()
