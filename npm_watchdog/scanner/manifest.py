"""Manifest reader for package.json."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from npm_watchdog.exceptions import (
    DirectoryNotFoundError,
    ManifestNotFoundError,
    ManifestParseError,
)
from npm_watchdog.scanner.models import DeclaredDependency

log = structlog.get_logger("npm_watchdog.scanner")

MANIFEST_NAME = "package.json"

# Merge order matters: later sections overwrite earlier ones on a name clash.
DEPENDENCY_SECTIONS = ("dependencies", "devDependencies")


class PackageJsonReader:
    """Load the declared dependency set from ``<root>/package.json``."""

    manifest_name = MANIFEST_NAME
    sections = DEPENDENCY_SECTIONS

    def read(self, root: Path) -> list[DeclaredDependency]:
        """Return declared dependencies in manifest declaration order.

        Production entries come first; a devDependencies entry with the same
        name replaces the production version spec but keeps its position.
        """
        if not root.is_dir():
            raise DirectoryNotFoundError(root)

        manifest_path = root / self.manifest_name
        if not manifest_path.is_file():
            raise ManifestNotFoundError(root)

        try:
            content = manifest_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ManifestParseError(manifest_path, f"not UTF-8 text ({exc.reason})") from exc

        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise ManifestParseError(manifest_path, str(exc)) from exc

        if not isinstance(data, dict):
            raise ManifestParseError(manifest_path, "top level is not a JSON object")

        merged: dict[str, str] = {}
        for section in self.sections:
            entries = data.get(section)
            if entries is None:
                continue
            if not isinstance(entries, dict):
                raise ManifestParseError(manifest_path, f"'{section}' is not an object")
            for name, spec in entries.items():
                if name in merged:
                    log.debug(
                        "manifest.dep_overwritten",
                        name=name,
                        old_spec=merged[name],
                        new_spec=spec,
                        section=section,
                    )
                merged[name] = spec if isinstance(spec, str) else json.dumps(spec)

        log.debug("manifest.loaded", path=str(manifest_path), count=len(merged))
        return [DeclaredDependency(name=name, version_spec=spec) for name, spec in merged.items()]


def read_manifest(root: Path) -> list[DeclaredDependency]:
    """Read ``package.json`` under *root* with the default reader."""
    return PackageJsonReader().read(root)
