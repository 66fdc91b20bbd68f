"""Custom exceptions for npm-watchdog."""

from __future__ import annotations

from pathlib import Path


class WatchdogError(Exception):
    """Base exception for all fatal analysis errors."""

    def __init__(self, path: Path | str, message: str | None = None):
        self.path = Path(path)
        super().__init__(message or str(self.path))


class DirectoryNotFoundError(WatchdogError):
    """Raised when the project root does not exist or is not a directory."""

    def __init__(self, path: Path | str):
        super().__init__(path, f"Directory {path} does not exist")


class ManifestNotFoundError(WatchdogError):
    """Raised when no package.json sits directly under the project root."""

    def __init__(self, path: Path | str):
        super().__init__(path, f"package.json not found in {path}")


class ManifestParseError(WatchdogError):
    """Raised when package.json is not valid JSON or has an unexpected shape."""

    def __init__(self, path: Path | str, reason: str):
        self.reason = reason
        super().__init__(path, f"Invalid manifest {path}: {reason}")
