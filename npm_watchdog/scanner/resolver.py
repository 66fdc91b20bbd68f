"""Resolve a module specifier to the npm package it belongs to."""

from __future__ import annotations


def resolve_package_name(specifier: str) -> str:
    """Return the top-level package name for *specifier*.

    ``"lodash/fp"`` -> ``"lodash"``; ``"@scope/pkg/sub/file"`` -> ``"@scope/pkg"``.
    A bare scope with no package segment (``"@scope"``) is returned as is.
    """
    parts = specifier.split("/")
    if parts[0].startswith("@") and len(parts) > 1:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]
