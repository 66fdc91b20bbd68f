"""Import extractor — regex scan of JS/TS text for module specifiers.

This is a textual scan, not a parse. Known limitations:

- imports inside comments, strings or template literals are still counted;
- ``require`` calls in dead branches (``if (false) { ... }``) are counted;
- only literal specifiers are seen, so ``require(name)`` is invisible;
- dynamic ``import("x")`` and ``export ... from "x"`` are not matched;
- the binding part of ``import ... from`` is greedy, so with two imports on
  one line (``import x from "a"; import y from "b";``) only the last is seen;
- files are decoded as strict UTF-8: one stray Latin-1 byte, even in a
  comment, makes the whole file unreadable, and every package it imports is
  then reported as unused.

Swapping the patterns for a real lexer only needs to keep
:func:`iter_specifiers`' contract (text in, specifiers out).
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import structlog

from npm_watchdog.scanner.models import FileScan

log = structlog.get_logger("npm_watchdog.scanner")

# Specifier body: first char rules out "./x", "../x" and "/abs/x".
_SPEC = r"""['"]([^./][^'"]*)['"]"""


@dataclass(frozen=True)
class ImportPattern:
    name: str
    regex: re.Pattern[str]


# Patterns are applied independently and may overlap (a namespace import
# also matches the general form); callers dedupe into a set.
IMPORT_PATTERNS: tuple[ImportPattern, ...] = (
    ImportPattern("require", re.compile(r"require\(" + _SPEC + r"\)")),
    ImportPattern("import-from", re.compile(r"import\s+.*\s+from\s+" + _SPEC)),
    ImportPattern("import-namespace", re.compile(r"import\s+\*\s+as\s+.*\s+from\s+" + _SPEC)),
    ImportPattern("import-side-effect", re.compile(r"import\s+" + _SPEC)),
)


def iter_specifiers(
    text: str, patterns: tuple[ImportPattern, ...] = IMPORT_PATTERNS
) -> Iterator[str]:
    """Yield every raw specifier matched by each pattern, duplicates included."""
    for pattern in patterns:
        for match in pattern.regex.finditer(text):
            yield match.group(1)


def extract_file(path: Path) -> FileScan:
    """Read *path* and extract its specifiers.

    Read or decode failures are returned on the scan instead of raised,
    so one bad file never aborts a run.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        log.debug("extractor.read_failed", path=str(path), error=str(exc))
        return FileScan(path=str(path), error=str(exc))
    return FileScan(path=str(path), specifiers=list(iter_specifiers(text)))
