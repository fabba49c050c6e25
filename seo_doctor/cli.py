# === FILE: seo_doctor/cli.py ===
#!/usr/bin/env python3
"""
Command-line entry point of SEO Doctor.

Usage:
  seo-doctor TARGET [options]

TARGET is an http(s) URL, an HTML file or a directory of HTML files.

Options:
  --config PATH       YAML/JSON config file; command-line values win
  --crawl             Follow same-origin links from the target URL
  --max-pages INT     Page budget for --crawl (default 10)
  --timeout SEC       Per-request timeout in seconds (default 15)
  --user-agent UA     User-Agent header for requests
  --fail-under SCORE  Exit with code 1 when the score is below SCORE
  --json PATH         Write the JSON report
  --md PATH           Write the Markdown report
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Also write logs to PATH
  --version, -v       Show the SEO Doctor version

Exit codes: 0 success, 1 score below --fail-under, 2 nothing to audit or
invalid input.

Example:
  seo-doctor https://example.com --crawl --max-pages 20 --json seo.json --fail-under 80
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from seo_doctor import __version__
from seo_doctor.config import load_config
from seo_doctor.engine import Engine, NoPagesError
from seo_doctor.logger import init_logging
from seo_doctor.report.json_report import render_json
from seo_doctor.report.markdown_report import render_markdown
from seo_doctor.report.text_report import render_text

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])

EXIT_BELOW_THRESHOLD = 1
EXIT_USAGE = 2


def print_error(message: str, code: int = EXIT_USAGE):
    click.secho(message, fg='red', err=True)
    sys.exit(code)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SEO Doctor, version %(version)s')
@click.argument('target', required=False)
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='YAML/JSON config file.'
)
@click.option('--crawl/--no-crawl', default=None, help='Crawl same-origin links.')
@click.option('--max-pages', 'max_pages', type=int, default=None, help='Max pages to crawl.')
@click.option('--timeout', type=float, default=None, help='Request timeout (seconds).')
@click.option('--user-agent', 'user_agent', default=None, help='User-Agent header.')
@click.option('--fail-under', 'fail_under', type=int, default=None, help='Exit non-zero if score below.')
@click.option(
    '--json', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Write the JSON report to a file.'
)
@click.option(
    '--md', 'md_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Write the Markdown report to a file.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file path (console only when omitted)'
)
def cli(target, config_path, crawl, max_pages, timeout, user_agent, fail_under,
        json_output, md_output, log_level, log_file):
    """Audit TARGET (URL, HTML file or directory) for SEO fundamentals."""
    init_logging(level=log_level, log_file=str(log_file) if log_file else None)

    try:
        cfg = load_config(
            config_path,
            target=target,
            crawl=crawl,
            max_pages=max_pages,
            timeout=timeout,
            user_agent=user_agent,
            fail_under=fail_under,
        )
    except (ValidationError, ValueError, TypeError, FileNotFoundError) as e:
        print_error(f'Invalid configuration: {e}')

    try:
        report = start_audit(cfg)
    except NoPagesError:
        print_error('No pages to audit.')
    except FileNotFoundError as e:
        print_error(str(e))

    click.echo(render_text(report))

    if json_output:
        try:
            render_json(report, json_output)
        except OSError as e:
            print_error(f'Failed to write JSON report: {e}')
    if md_output:
        try:
            render_markdown(report, md_output)
        except OSError as e:
            print_error(f'Failed to write Markdown report: {e}')

    if cfg.fail_under and report.score < cfg.fail_under:
        sys.exit(EXIT_BELOW_THRESHOLD)


def start_audit(cfg):
    return Engine(cfg).start_audit()


main = cli

if __name__ == "__main__":
    cli()
