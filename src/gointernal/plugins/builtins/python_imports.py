"""Built-in extractor for Python relative imports.

Relative imports are rewritten into path-style specifiers so they flow
through the same decision as ECMAScript imports:

- ``from .internal.db import conn``  ->  ``./internal/db``
- ``from .. import internal``        ->  ``../internal``
- ``importlib.import_module("..internal", __package__)`` -> ``../internal``

Absolute imports keep their dotted name and are never regulated.
"""

from __future__ import annotations

import ast
from typing import TYPE_CHECKING

from gointernal.domain.sites import ImportKind, ImportSite, SourceSyntaxError
from gointernal.plugins.hookspecs import hookimpl

if TYPE_CHECKING:
    from pathlib import Path

PYTHON_SUFFIXES = frozenset({".py", ".pyi"})


def relative_specifier(level: int, module: str | None) -> str:
    """Translate a relative import (*level* dots + *module*) to a path specifier."""
    prefix = "./" if level == 1 else "../" * (level - 1)
    if not module:
        return prefix.rstrip("/")
    return prefix + module.replace(".", "/")


def _from_import_sites(node: ast.ImportFrom) -> list[ImportSite]:
    if node.level == 0:
        return [ImportSite(node.module or "", node.lineno, node.col_offset, ImportKind.FROM_IMPORT)]
    if node.module:
        spec = relative_specifier(node.level, node.module)
        return [ImportSite(spec, node.lineno, node.col_offset, ImportKind.FROM_IMPORT)]
    # ``from . import a, b`` imports the submodules themselves.
    sites = []
    for alias in node.names:
        module = None if alias.name == "*" else alias.name
        spec = relative_specifier(node.level, module)
        sites.append(ImportSite(spec, node.lineno, node.col_offset, ImportKind.FROM_IMPORT))
    return sites


def _is_import_module_call(node: ast.Call) -> bool:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id == "import_module"
    if isinstance(func, ast.Attribute):
        return func.attr == "import_module"
    return False


def _import_module_site(node: ast.Call) -> ImportSite | None:
    if not _is_import_module_call(node) or not node.args:
        return None
    first = node.args[0]
    if not isinstance(first, ast.Constant) or not isinstance(first.value, str):
        return None
    name = first.value
    level = len(name) - len(name.lstrip("."))
    if level == 0:
        return ImportSite(name, first.lineno, first.col_offset, ImportKind.IMPORT_MODULE)
    spec = relative_specifier(level, name[level:] or None)
    return ImportSite(spec, first.lineno, first.col_offset, ImportKind.IMPORT_MODULE)


def extract_python_sites(source: str, filename: str = "<unknown>") -> list[ImportSite]:
    """Return every import site in Python *source*, in source order.

    Raises:
        SourceSyntaxError: *source* is not valid Python.
    """
    try:
        tree = ast.parse(source, filename=filename)
    except SyntaxError as exc:
        raise SourceSyntaxError(filename, exc.lineno, exc.msg) from exc

    sites: list[ImportSite] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.ImportFrom):
            sites.extend(_from_import_sites(node))
        elif isinstance(node, ast.Import):
            for alias in node.names:
                sites.append(ImportSite(alias.name, node.lineno, node.col_offset))
        elif isinstance(node, ast.Call):
            site = _import_module_site(node)
            if site is not None:
                sites.append(site)
    return sorted(sites, key=lambda s: (s.line, s.column))


class PythonImportsPlugin:
    """Extract import sites from ``.py`` and ``.pyi`` files."""

    @hookimpl
    def extract_import_sites(self, path: Path, source: str) -> list[ImportSite] | None:
        if path.suffix not in PYTHON_SUFFIXES:
            return None
        return extract_python_sites(source, filename=str(path))
