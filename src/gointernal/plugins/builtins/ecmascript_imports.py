"""Built-in extractor for JavaScript and TypeScript imports.

Recognized forms (literal string specifiers only):

- ``import x from './a'``, ``import { x } from './a'``, ``import './a'``
- ``export { x } from './a'``, ``export * from './a'``
- ``require('./a')`` with exactly one argument
- ``import('./a')``

Comments are blanked out before matching so commented-out imports are
ignored while line/column positions stay intact, and import-like text
inside string or template literals is skipped. Regular-expression
literals containing ``//`` or ``/*`` can confuse the comment scanner.
"""

from __future__ import annotations

import bisect
import re
from typing import TYPE_CHECKING

from gointernal.domain.sites import ImportKind, ImportSite
from gointernal.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from pathlib import Path

ECMASCRIPT_SUFFIXES = frozenset({".js", ".jsx", ".mjs", ".cjs", ".ts", ".tsx", ".mts", ".cts"})

_SPEC = r"""(?P<quote>['"])(?P<spec>[^'"\n]+)(?P=quote)"""

_PATTERNS: tuple[tuple[ImportKind, re.Pattern[str]], ...] = (
    (
        ImportKind.IMPORT,
        re.compile(rf"(?<![\w$.])import\s+(?:[^'\";()]*?\s*\bfrom\s*)?{_SPEC}"),
    ),
    (
        ImportKind.EXPORT,
        re.compile(
            rf"(?<![\w$.])export\s+(?:type\s+)?(?:\*(?:\s+as\s+[\w$]+)?|\{{[^}}]*\}})\s*from\s*{_SPEC}"
        ),
    ),
    (
        ImportKind.REQUIRE,
        re.compile(rf"(?<![\w$.])require\s*\(\s*{_SPEC}\s*\)"),
    ),
    (
        ImportKind.DYNAMIC_IMPORT,
        re.compile(rf"(?<![\w$.])import\s*\(\s*{_SPEC}\s*\)"),
    ),
)


def scan_source(source: str) -> tuple[str, list[tuple[int, int]]]:
    """Blank out comments and record where string literals sit.

    Returns the source with ``//`` and ``/* */`` comments replaced by
    spaces (newlines kept, so offsets are unchanged) and the
    ``(start, end)`` offsets of every ``'...'``, ``"..."`` and
    ``` `...` ``` literal, quotes included. Template substitutions count
    as part of their literal.
    """
    out = list(source)
    spans: list[tuple[int, int]] = []
    i, n = 0, len(source)
    quote: str | None = None
    opened = 0
    while i < n:
        ch = source[i]
        if quote is not None:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                spans.append((opened, i + 1))
                quote = None
            elif ch == "\n" and quote != "`":
                spans.append((opened, i))
                quote = None
            i += 1
            continue
        if ch in "'\"`":
            quote, opened = ch, i
            i += 1
            continue
        if source.startswith("//", i):
            end = source.find("\n", i)
            end = n if end == -1 else end
        elif source.startswith("/*", i):
            end = source.find("*/", i + 2)
            end = n if end == -1 else end + 2
        else:
            i += 1
            continue
        for j in range(i, end):
            if source[j] != "\n":
                out[j] = " "
        i = end
    if quote is not None:
        spans.append((opened, n))
    return "".join(out), spans


def blank_comments(source: str) -> str:
    """Replace ``//`` and ``/* */`` comments with spaces, keeping newlines."""
    return scan_source(source)[0]


def _inside_literal(offset: int, starts: list[int], spans: list[tuple[int, int]]) -> bool:
    index = bisect.bisect_right(starts, offset) - 1
    return index >= 0 and offset < spans[index][1]


def _line_starts(source: str) -> list[int]:
    starts = [0]
    starts.extend(m.end() for m in re.finditer("\n", source))
    return starts


def extract_ecmascript_sites(source: str) -> list[ImportSite]:
    """Return every literal import site in JS/TS *source*, in source order.

    Matches whose keyword sits inside a string or template literal are
    text, not code, and are skipped.
    """
    text, spans = scan_source(source)
    span_starts = [start for start, _ in spans]
    starts = _line_starts(text)
    sites: list[ImportSite] = []
    for kind, pattern in _PATTERNS:
        for match in pattern.finditer(text):
            if _inside_literal(match.start(), span_starts, spans):
                continue
            offset = match.start("quote")
            line_index = bisect.bisect_right(starts, offset) - 1
            sites.append(
                ImportSite(
                    specifier=match.group("spec"),
                    line=line_index + 1,
                    column=offset - starts[line_index],
                    kind=kind,
                )
            )
    return sorted(sites, key=lambda s: (s.line, s.column))


class EcmascriptImportsPlugin:
    """Extract import sites from JavaScript/TypeScript files."""

    @hookimpl
    def extract_import_sites(self, path: Path, source: str) -> list[ImportSite] | None:
        if path.suffix not in ECMASCRIPT_SUFFIXES:
            return None
        return extract_ecmascript_sites(source)
