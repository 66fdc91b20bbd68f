"""Dependency usage scanner — find declared npm packages nothing imports."""

from npm_watchdog.scanner.analyzer import UsageAnalyzer, analyze, classify
from npm_watchdog.scanner.models import (
    AnalysisOutcome,
    AnalysisResult,
    AnalysisStatus,
    DeclaredDependency,
    FileReadWarning,
    FileScan,
)
from npm_watchdog.scanner.resolver import resolve_package_name

__all__ = [
    "AnalysisOutcome",
    "AnalysisResult",
    "AnalysisStatus",
    "DeclaredDependency",
    "FileReadWarning",
    "FileScan",
    "UsageAnalyzer",
    "analyze",
    "classify",
    "resolve_package_name",
]
