"""CLI entry point: npm-watchdog.

Usage:
    npm-watchdog                          # analyze the current directory
    npm-watchdog --root packages/web      # analyze another project root
    npm-watchdog --ignore typescript,jest # never report these as unused
    npm-watchdog --json                   # machine-readable output
    npm-watchdog --lang es                # Spanish report
"""

from __future__ import annotations

import sys

import click
import structlog

from npm_watchdog import __version__
from npm_watchdog.core.config import Settings
from npm_watchdog.core.logging import setup_logging
from npm_watchdog.exceptions import WatchdogError
from npm_watchdog.presentation.locale import DEFAULT_LOCALE, MESSAGES, messages_for
from npm_watchdog.presentation.render import (
    TextRenderer,
    format_error,
    format_read_warning,
    render_json,
    status_message,
)
from npm_watchdog.scanner.analyzer import UsageAnalyzer
from npm_watchdog.scanner.models import AnalysisStatus

log = structlog.get_logger("npm_watchdog.cli")

_HELP = MESSAGES[DEFAULT_LOCALE]


def _split_ignore(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> list[str]:
    """Parse ``"a, b,,c"`` into ``["a", "b", "c"]``."""
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


@click.command(help=_HELP.description)
@click.version_option(__version__, prog_name="npm-watchdog")
@click.option("-j", "--json", "as_json", is_flag=True, help=_HELP.json_option)
@click.option(
    "-i", "--ignore", "ignore", default=None, callback=_split_ignore, help=_HELP.ignore_option
)
@click.option("-r", "--root", default=".", show_default=True, help=_HELP.root_option)
@click.option("-l", "--lang", default=None, help=_HELP.lang_option)
@click.option("--minimal", is_flag=True, help=_HELP.minimal_option)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    as_json: bool,
    ignore: list[str],
    root: str,
    lang: str | None,
    minimal: bool,
    verbose: bool,
) -> None:
    settings = Settings.from_env()
    setup_logging(level="DEBUG" if verbose else settings.log_level, fmt=settings.log_format)
    messages = messages_for(lang or settings.lang)

    try:
        outcome = UsageAnalyzer().analyze(root, ignore)
    except WatchdogError as exc:
        click.echo(click.style(format_error(exc, messages), fg="red"), err=True)
        sys.exit(1)
    except Exception as exc:
        log.debug("cli.unhandled_error", exc_info=True)
        click.echo(click.style(format_error(exc, messages), fg="red"), err=True)
        sys.exit(1)

    result = outcome.result
    if outcome.status is not AnalysisStatus.COMPLETED or result is None:
        click.echo(click.style(status_message(outcome.status, messages), fg="yellow"), err=as_json)
        return

    for warning in outcome.warnings:
        click.echo(click.style(format_read_warning(warning, messages), fg="yellow"), err=True)

    if as_json:
        click.echo(render_json(result))
    else:
        renderer = TextRenderer(messages, minimal=minimal)
        click.echo(renderer.render(result, files_scanned=outcome.files_scanned))


if __name__ == "__main__":
    main()
