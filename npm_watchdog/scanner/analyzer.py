"""UsageAnalyzer — classify declared dependencies as used, unused or ignored."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

import structlog

from npm_watchdog.scanner.discovery import SourceFileDiscoverer
from npm_watchdog.scanner.extractor import extract_file
from npm_watchdog.scanner.manifest import PackageJsonReader
from npm_watchdog.scanner.models import (
    AnalysisOutcome,
    AnalysisResult,
    AnalysisStatus,
    DeclaredDependency,
    FileReadWarning,
    FileScan,
)
from npm_watchdog.scanner.resolver import resolve_package_name

log = structlog.get_logger("npm_watchdog.scanner")


def classify(
    declared: Sequence[DeclaredDependency],
    detected: set[str] | frozenset[str],
    ignore: Iterable[str] = (),
) -> AnalysisResult:
    """Split *declared* into used / unused / ignored buckets.

    Walks the manifest order once; ignore wins over both used and unused,
    so no name lands in two buckets.
    """
    ignore_set = set(ignore)
    used: list[str] = []
    unused: list[str] = []
    ignored: list[str] = []
    for dep in declared:
        if dep.name in ignore_set:
            ignored.append(dep.name)
        elif dep.name in detected:
            used.append(dep.name)
        else:
            unused.append(dep.name)

    stray = ignore_set - {dep.name for dep in declared}
    if stray:
        log.debug("analyzer.ignore_not_declared", names=sorted(stray))

    return AnalysisResult(
        declared=tuple(declared),
        used_packages=tuple(used),
        unused_packages=tuple(unused),
        ignored_packages=tuple(ignored),
        detected_packages=frozenset(detected),
    )


def collect_used(scans: Iterable[FileScan]) -> tuple[set[str], list[FileReadWarning]]:
    """Reduce per-file scans into the used-package set and read warnings."""
    used: set[str] = set()
    warnings: list[FileReadWarning] = []
    for scan in scans:
        if not scan.ok:
            warnings.append(FileReadWarning(path=scan.path, error=scan.error or ""))
            continue
        used.update(resolve_package_name(spec) for spec in scan.specifiers)
    return used, warnings


class UsageAnalyzer:
    """Orchestrates manifest reading, discovery, extraction and classification."""

    def __init__(
        self,
        reader: PackageJsonReader | None = None,
        discoverer: SourceFileDiscoverer | None = None,
        extractor: Callable[[Path], FileScan] = extract_file,
    ) -> None:
        self._reader = reader or PackageJsonReader()
        self._discoverer = discoverer or SourceFileDiscoverer()
        self._extract = extractor

    def analyze(self, root: Path | str, ignore: Iterable[str] = ()) -> AnalysisOutcome:
        """Run one analysis of the project at *root*.

        Raises the :mod:`npm_watchdog.exceptions` errors for a missing root,
        a missing manifest or an unparseable manifest. An empty dependency set
        or an empty source tree returns early without scanning further.
        """
        root = Path(root).resolve()
        ignore = list(ignore)
        log.info("analyzer.started", root=str(root), ignore=ignore)

        declared = self._reader.read(root)
        if not declared:
            log.info("analyzer.no_dependencies", root=str(root))
            return AnalysisOutcome(status=AnalysisStatus.NO_DEPENDENCIES)

        files = self._discoverer.discover(root)
        if not files:
            log.info("analyzer.no_source_files", root=str(root))
            return AnalysisOutcome(status=AnalysisStatus.NO_SOURCE_FILES)

        detected, warnings = collect_used(self._extract(path) for path in files)
        result = classify(declared, detected, ignore)

        log.info(
            "analyzer.completed",
            files=len(files),
            total=result.total_count,
            used=len(result.used_packages),
            unused=len(result.unused_packages),
            ignored=len(result.ignored_packages),
            unreadable=len(warnings),
        )
        return AnalysisOutcome(
            status=AnalysisStatus.COMPLETED,
            result=result,
            warnings=warnings,
            files_scanned=len(files),
        )


def analyze(root: Path | str, ignore: Iterable[str] = ()) -> AnalysisOutcome:
    """Analyze *root* with the default components."""
    return UsageAnalyzer().analyze(root, ignore)
