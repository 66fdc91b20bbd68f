"""npm-watchdog: find declared npm dependencies that no source file imports."""

__version__ = "1.0.0"

from npm_watchdog.scanner import (  # noqa: E402
    AnalysisOutcome,
    AnalysisResult,
    AnalysisStatus,
    UsageAnalyzer,
    analyze,
)

__all__ = [
    "AnalysisOutcome",
    "AnalysisResult",
    "AnalysisStatus",
    "UsageAnalyzer",
    "analyze",
]
