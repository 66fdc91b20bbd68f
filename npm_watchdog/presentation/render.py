"""Render analysis outcomes as styled text or JSON."""

from __future__ import annotations

import json
import random
from collections.abc import Callable, Sequence

import click

from npm_watchdog.exceptions import (
    DirectoryNotFoundError,
    ManifestNotFoundError,
    ManifestParseError,
    WatchdogError,
)
from npm_watchdog.presentation.locale import Messages
from npm_watchdog.scanner.models import AnalysisResult, AnalysisStatus, FileReadWarning

BANNER = "🐶 npm-watchdog"


def render_json(result: AnalysisResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


class TextRenderer:
    """Styled, localized text report."""

    def __init__(
        self,
        messages: Messages,
        *,
        minimal: bool = False,
        choose: Callable[[Sequence[str]], str] = random.choice,
    ) -> None:
        self.messages = messages
        self.minimal = minimal
        self._choose = choose

    def render(self, result: AnalysisResult, files_scanned: int | None = None) -> str:
        m = self.messages
        lines: list[str] = []

        if not self.minimal:
            lines.append("")
            lines.append(click.style(BANNER, bold=True))
            lines.append(click.style(self._choose(m.taglines) + "\n", italic=True))

        if files_scanned is not None:
            lines.append(click.style(m.files_scanned.format(count=files_scanned), bold=True))
        lines.append(click.style(m.total_dependencies.format(count=result.total_count), bold=True))
        lines.append(click.style(m.used_dependencies.format(count=len(result.used_packages)), bold=True))
        lines.append(
            click.style(m.unused_dependencies.format(count=len(result.unused_packages)), bold=True)
        )

        if result.ignored_packages:
            names = ", ".join(result.ignored_packages)
            lines.append(click.style("\n" + m.ignored_modules.format(names=names), fg="yellow"))

        if result.unused_packages:
            lines.append(click.style("\n" + m.unused_label, fg="red"))
            for name in result.unused_packages:
                lines.append(click.style(f"  - {name} ({result.version_of(name)})", fg="red"))
            lines.append(click.style("\n" + m.suggestion, fg="cyan"))
            lines.append(
                click.style("npm uninstall " + " ".join(result.unused_packages), fg="cyan")
            )
        else:
            lines.append(click.style("\n" + m.good_job, fg="green"))

        return "\n".join(lines)


def status_message(status: AnalysisStatus, messages: Messages) -> str:
    """Informational line for the two nothing-to-do statuses."""
    if status is AnalysisStatus.NO_DEPENDENCIES:
        return messages.no_dependencies
    if status is AnalysisStatus.NO_SOURCE_FILES:
        return messages.no_source_files
    raise ValueError(f"no message for status {status!r}")


def format_read_warning(warning: FileReadWarning, messages: Messages) -> str:
    return messages.read_warning.format(path=warning.path, error=warning.error)


def format_error(exc: BaseException, messages: Messages) -> str:
    if isinstance(exc, DirectoryNotFoundError):
        return messages.error_dir.format(path=exc.path)
    if isinstance(exc, ManifestNotFoundError):
        return messages.error_manifest_missing.format(path=exc.path)
    if isinstance(exc, ManifestParseError):
        return messages.error_manifest_invalid.format(path=exc.path, reason=exc.reason)
    if isinstance(exc, WatchdogError):
        return f"{messages.error} {exc}"
    return f"{messages.error} {exc.__class__.__name__}: {exc}"
