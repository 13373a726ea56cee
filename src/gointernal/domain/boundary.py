"""Locate the ``internal`` directory that governs a path.

Only the *last* segment named ``internal`` counts: in
``/a/internal/b/internal/c`` the governing directory is
``/a/internal/b/internal`` and the module root is ``/a/internal/b``.
"""

from __future__ import annotations

from dataclasses import dataclass

from gointernal.domain.paths import join_segments, segments

INTERNAL_DIR_NAME = "internal"


@dataclass(frozen=True)
class Boundary:
    """A governing internal directory together with its module root."""

    internal_dir: str
    module_root: str


def find_last_internal_segment_index(
    path: str, internal_name: str = INTERNAL_DIR_NAME
) -> int | None:
    """Index (into :func:`segments`) of the last ``internal`` segment, or None."""
    parts = segments(path)
    for index in range(len(parts) - 1, -1, -1):
        if parts[index] == internal_name:
            return index
    return None


def internal_directory_of(path: str, internal_name: str = INTERNAL_DIR_NAME) -> str | None:
    """Prefix of *path* up to and including the last ``internal`` segment."""
    index = find_last_internal_segment_index(path, internal_name)
    if index is None:
        return None
    return join_segments(segments(path)[: index + 1])


def module_root_of(path: str, internal_name: str = INTERNAL_DIR_NAME) -> str | None:
    """Prefix of *path* up to but excluding the last ``internal`` segment.

    ``/internal/x`` has the filesystem root as its module root.
    """
    index = find_last_internal_segment_index(path, internal_name)
    if index is None:
        return None
    return join_segments(segments(path)[:index])


def resolve_boundary(path: str, internal_name: str = INTERNAL_DIR_NAME) -> Boundary | None:
    """Return the :class:`Boundary` governing *path*, or None if it has none."""
    index = find_last_internal_segment_index(path, internal_name)
    if index is None:
        return None
    parts = segments(path)
    return Boundary(
        internal_dir=join_segments(parts[: index + 1]),
        module_root=join_segments(parts[:index]),
    )
