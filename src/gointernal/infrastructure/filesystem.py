"""Source-file discovery and reading.

gointernal never writes to the files it checks. Discovery works on
explicit files and on directory trees, pruning excluded directories.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from pathlib import Path


def _walk_files(root: Path, excluded: frozenset[str]) -> Iterator[Path]:
    """Yield files under *root*, never descending into *excluded* names."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in excluded]
        base = Path(dirpath)
        for name in filenames:
            yield base / name


def find_source_files(
    paths: Iterable[Path],
    *,
    extensions: Iterable[str],
    exclude_dirs: Iterable[str] = (),
) -> list[Path]:
    """Discover checkable source files under *paths*.

    Files given explicitly are kept when their suffix matches, even if an
    exclusion would prune them during a walk. Directories are walked
    recursively and excluded directory names are pruned before they are
    entered, so the walked directory itself is never tested. The result
    is sorted and de-duplicated.

    Raises:
        FileNotFoundError: One of *paths* does not exist.
    """
    suffixes = frozenset(extensions)
    excluded = frozenset(exclude_dirs)
    found: set[Path] = set()

    for root in paths:
        if root.is_file():
            if root.suffix in suffixes:
                found.add(root)
            continue
        if not root.is_dir():
            msg = f"No such file or directory: {root}"
            raise FileNotFoundError(msg)
        found.update(p for p in _walk_files(root, excluded) if p.suffix in suffixes)

    return sorted(found)


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text."""
    return path.read_text(encoding="utf-8")
