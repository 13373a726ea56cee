"""Pure POSIX path utilities used by the boundary decision.

Paths are plain strings with ``/`` separators. Separator conversion for
other platforms happens before anything reaches this module; symlinks are
never resolved.

INVARIANT: every comparison works on :func:`normalize`-d paths, and
comparisons are segment-wise so ``/auth`` never matches ``/authentication``.
"""

from __future__ import annotations

import posixpath
from collections.abc import Iterable
from pathlib import Path

SEP = "/"


def is_absolute(path: str) -> bool:
    """Whether *path* starts at the filesystem root."""
    return path.startswith(SEP)


def normalize(path: str, base: str | None = None) -> str:
    """Return an absolute, normalized form of *path*.

    A relative *path* is resolved against *base*; if that is still
    relative (or *base* is omitted) the current working directory is
    used. ``.``/``..`` segments, duplicate separators and trailing
    separators are collapsed. The result is always absolute, so
    ``normalize(normalize(p)) == normalize(p)``.
    """
    if not is_absolute(path):
        if base is not None:
            path = posixpath.join(base, path)
        if not is_absolute(path):
            path = posixpath.join(Path.cwd().as_posix(), path)
    normalized = posixpath.normpath(path)
    # POSIX allows an implementation-defined leading "//"; treat it as root.
    if normalized.startswith("//"):
        normalized = SEP + normalized.lstrip(SEP)
    return normalized


def segments(path: str) -> tuple[str, ...]:
    """Split *path* into its non-empty segments (the root is implied)."""
    return tuple(part for part in path.split(SEP) if part)


def join_segments(parts: Iterable[str]) -> str:
    """Build an absolute path from *parts*; no parts means the root."""
    return SEP + SEP.join(parts)


def directory_of(file_path: str) -> str:
    """Return the parent directory of *file_path* (the root stays the root)."""
    return posixpath.dirname(normalize(file_path))


def is_ancestor_or_equal(ancestor: str, descendant: str) -> bool:
    """True iff *descendant* is *ancestor* or lies beneath it."""
    head = segments(ancestor)
    return segments(descendant)[: len(head)] == head


def relative_segments(base: str, target: str) -> tuple[str, ...]:
    """Segments of *target* below *base*; empty when they are equal.

    Raises:
        ValueError: *target* is not inside *base*.
    """
    if not is_ancestor_or_equal(base, target):
        msg = f"{target!r} is not inside {base!r}"
        raise ValueError(msg)
    return segments(target)[len(segments(base)) :]
