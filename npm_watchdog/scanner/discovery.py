"""Source file discovery — find JS/TS sources under a project root."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

log = structlog.get_logger("npm_watchdog.scanner")

SOURCE_EXTENSIONS: frozenset[str] = frozenset({".js", ".jsx", ".ts", ".tsx"})

# Dependency cache, built output and compiled bundles, excluded at any depth.
EXCLUDED_DIRS: frozenset[str] = frozenset({"node_modules", "dist", "build"})


class SourceFileDiscoverer:
    """Walk a project tree and collect candidate source files.

    Exclusions are matched against single path components rather than
    path strings, so the host path separator never affects matching.
    Hidden files and directories (leading ``.``) are skipped.
    Subdirectories that cannot be listed are logged and skipped.
    """

    def __init__(
        self,
        extensions: frozenset[str] | set[str] = SOURCE_EXTENSIONS,
        excluded_dirs: frozenset[str] | set[str] = EXCLUDED_DIRS,
    ) -> None:
        self.extensions = frozenset(extensions)
        self.excluded_dirs = frozenset(excluded_dirs)

    def discover(self, root: Path) -> list[Path]:
        """Return absolute, sorted paths of every matching file under *root*."""
        root = root.resolve()
        files: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=self._on_walk_error):
            dirnames[:] = [d for d in dirnames if not self._skip_dir(d)]
            for name in filenames:
                if name.startswith("."):
                    continue
                path = Path(dirpath) / name
                if path.suffix in self.extensions and path.is_file():
                    files.append(path)
        files.sort()
        log.debug("discovery.completed", root=str(root), count=len(files))
        return files

    def _skip_dir(self, name: str) -> bool:
        return name.startswith(".") or name in self.excluded_dirs

    @staticmethod
    def _on_walk_error(exc: OSError) -> None:
        log.warning("discovery.dir_skipped", path=exc.filename, error=exc.strerror or str(exc))


def discover_source_files(root: Path) -> list[Path]:
    """Discover source files under *root* with the default extension and exclusion sets."""
    return SourceFileDiscoverer().discover(root)
