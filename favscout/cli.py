# === FILE: favscout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа FavScout для командной строки.

Опции:
  --file, -f PATH     Файл со списком URL (по одному на строку)
  --config, -c PATH   YAML/JSON-конфиг (см. favscout.config)
  --db PATH           Файл базы SQLite (default: favicons.db)
  --timeout SEC       Таймаут одного HTTP-запроса
  --concurrency N     Сколько страниц обрабатывать параллельно
  --single-fetch      Один запрос на favicon для обоих хэшей
  --mode MODE         loose | html — как искать ссылки на favicon
  --json PATH         Сохранить JSON-отчёт о запуске
  --html PATH         Сохранить HTML-отчёт о запуске
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Пример:
  favscout --file urls.txt --db favicons.db --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click

from favscout import __version__
from favscout.config import load_config
from favscout.errors import InputError, StorageError
from favscout.logger import DEFAULT_FORMAT, init_logging
from favscout.pipeline import run_pipeline
from favscout.report import render_html, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='FavScout, version %(version)s')
@click.option(
    '--file', '-f', 'input_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='File containing a list of URLs to scrape for favicon.ico links.'
)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--db', 'database',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл базы SQLite (override database).'
)
@click.option(
    '--timeout', 'timeout',
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help='Таймаут одного запроса, секунд (override timeout).'
)
@click.option(
    '--concurrency', 'concurrency',
    type=click.IntRange(min=1),
    default=None,
    help='Число страниц, обрабатываемых параллельно (override concurrency).'
)
@click.option(
    '--single-fetch', is_flag=True,
    help='Скачивать favicon один раз для обоих хэшей.'
)
@click.option(
    '--mode', 'extraction_mode',
    type=click.Choice(['loose', 'html']),
    default=None,
    help='loose: искать по всему тексту; html: только в атрибутах тегов.'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, input_file, config_path, database, timeout, concurrency, single_fetch,
        extraction_mode, json_output, html_output, log_level, log_file, log_format):
    """Scan pages for favicon.ico links and record their MD5/SHA256 digests."""
    if input_file is None:
        click.echo('Please provide a filename using the --file flag.')
        click.echo(ctx.get_usage())
        return

    init_logging(level=log_level, log_file=log_file, log_format=log_format)

    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Error loading configuration: {e}')

    overrides = {
        'database': database,
        'timeout': timeout,
        'concurrency': concurrency,
        'extraction_mode': extraction_mode,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if single_fetch:
        overrides['refetch_digests'] = False
    if overrides:
        cfg = cfg.model_copy(update=overrides)

    try:
        summary = asyncio.run(run_pipeline(cfg, input_file))
    except InputError as e:
        print_error(f'Error reading URLs from file: {e}')
    except StorageError as e:
        print_error(f'Error opening database: {e}')

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(summary, json_output)}')
        except Exception as e:
            print_error(f'Error saving JSON report: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(summary, html_output)}')
        except Exception as e:
            print_error(f'Error saving HTML report: {e}')


if __name__ == "__main__":
    cli()
