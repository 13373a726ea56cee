"""Import sites: a literal import specifier and where it was written."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ImportKind(StrEnum):
    """Syntactic form an import site was found in."""

    IMPORT = "import"
    EXPORT = "export"
    REQUIRE = "require"
    DYNAMIC_IMPORT = "dynamic-import"
    FROM_IMPORT = "from-import"
    IMPORT_MODULE = "import-module"


@dataclass(frozen=True)
class ImportSite:
    """A literal import target found in a source file.

    ``line`` is 1-based and ``column`` 0-based, matching :mod:`ast`.
    """

    specifier: str
    line: int
    column: int
    kind: ImportKind = ImportKind.IMPORT


class SourceSyntaxError(ValueError):
    """A source file could not be parsed for import sites."""

    def __init__(self, filename: str, line: int | None, detail: str) -> None:
        self.filename = filename
        self.line = line
        self.detail = detail
        where = f"{filename}:{line}" if line is not None else filename
        super().__init__(f"Cannot parse {where}: {detail}")
