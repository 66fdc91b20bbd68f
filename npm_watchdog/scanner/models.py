"""Data models for the dependency usage scanner."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DeclaredDependency:
    """A single dependency declared in package.json."""

    name: str
    version_spec: str


@dataclass(frozen=True)
class FileReadWarning:
    """A source file that could not be read; it contributes no imports."""

    path: str
    error: str


@dataclass
class FileScan:
    """Extraction result for one source file.

    Exactly one of ``specifiers`` (possibly empty) or ``error`` is meaningful:
    when ``error`` is set the file was unreadable and ``specifiers`` is empty.
    """

    path: str
    specifiers: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class AnalysisResult:
    """Classification of every declared dependency."""

    declared: tuple[DeclaredDependency, ...]
    used_packages: tuple[str, ...]
    unused_packages: tuple[str, ...]
    ignored_packages: tuple[str, ...]
    detected_packages: frozenset[str] = frozenset()

    @property
    def total_count(self) -> int:
        return len(self.declared)

    def version_of(self, name: str) -> str | None:
        for dep in self.declared:
            if dep.name == name:
                return dep.version_spec
        return None

    def to_dict(self) -> dict:
        return {
            "totalDependencies": self.total_count,
            "usedDependencies": list(self.used_packages),
            "unusedDependencies": list(self.unused_packages),
            "ignoredModules": list(self.ignored_packages),
        }


class AnalysisStatus(enum.Enum):
    COMPLETED = "completed"
    NO_DEPENDENCIES = "no_dependencies"
    NO_SOURCE_FILES = "no_source_files"


@dataclass
class AnalysisOutcome:
    """What one analyzer run produced.

    ``result`` is only set when ``status`` is COMPLETED; the other two
    statuses are successful short-circuits with nothing to report.
    """

    status: AnalysisStatus
    result: AnalysisResult | None = None
    warnings: list[FileReadWarning] = field(default_factory=list)
    files_scanned: int = 0
