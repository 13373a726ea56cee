"""The internal-boundary decision.

Given the file that contains an import and the absolute path the import
points at, decide whether the import crosses a forbidden ``internal``
boundary. Rules are applied in order and the first match wins:

1. No ``internal`` segment in the target: allowed.
2. Importer and target share the same governing internal directory:
   allowed (internal code may use itself freely).
3. Importer directory is outside the module root: denied.
4. Importer directory is more than ``max_submodule_depth`` levels below
   the module root (a nested submodule): denied. Otherwise allowed.

The decision is pure apart from a ``boundary.fail_closed`` warning event
when malformed input is rejected.
"""

from __future__ import annotations

from enum import StrEnum

import structlog
from pydantic import BaseModel

from gointernal.domain.boundary import INTERNAL_DIR_NAME, internal_directory_of, resolve_boundary
from gointernal.domain.paths import (
    directory_of,
    is_absolute,
    is_ancestor_or_equal,
    normalize,
    relative_segments,
)

log = structlog.get_logger(__name__)

RULE_ID = "no-cross-internal-imports"
VIOLATION_MESSAGE = "Do not import internal modules from outside their module root."


class Reason(StrEnum):
    """Why a verdict was reached."""

    NOT_RELATIVE = "NOT_RELATIVE"
    NO_INTERNAL_SEGMENT = "NO_INTERNAL_SEGMENT"
    SAME_INTERNAL_DIR = "SAME_INTERNAL_DIR"
    WITHIN_MODULE_ROOT = "WITHIN_MODULE_ROOT"
    SUBMODULE_DENIED = "SUBMODULE_DENIED"
    OUTSIDE_MODULE_ROOT = "OUTSIDE_MODULE_ROOT"


class BoundaryPolicy(BaseModel):
    """Tunable constants of the decision.

    Attributes:
        internal_name: Directory name that marks an internal boundary.
        max_submodule_depth: Deepest importer directory (in levels below
            the module root) still allowed through. ``None`` turns the
            submodule rule off.
    """

    model_config = {"frozen": True}

    internal_name: str = INTERNAL_DIR_NAME
    max_submodule_depth: int | None = 1


class BoundaryVerdict(BaseModel):
    """Outcome of one decision."""

    model_config = {"frozen": True}

    allowed: bool
    reason: Reason
    internal_dir: str | None = None
    module_root: str | None = None


DEFAULT_POLICY = BoundaryPolicy()


def is_relative_specifier(specifier: str) -> bool:
    """True for ``.``/``..`` and specifiers starting with ``./`` or ``../``."""
    return specifier in (".", "..") or specifier.startswith(("./", "../"))


def decide(
    importer_file: str,
    importee_target: str,
    *,
    policy: BoundaryPolicy = DEFAULT_POLICY,
) -> BoundaryVerdict:
    """Decide whether *importer_file* may import *importee_target*.

    Both arguments must be absolute. Anything else fails closed.
    """
    if not is_absolute(importer_file) or not is_absolute(importee_target):
        log.warning("boundary.fail_closed", importer=importer_file, target=importee_target)
        return BoundaryVerdict(allowed=False, reason=Reason.OUTSIDE_MODULE_ROOT)

    target = normalize(importee_target)
    importer_dir = directory_of(importer_file)

    boundary = resolve_boundary(target, policy.internal_name)
    if boundary is None:
        return BoundaryVerdict(allowed=True, reason=Reason.NO_INTERNAL_SEGMENT)

    found = {"internal_dir": boundary.internal_dir, "module_root": boundary.module_root}

    if internal_directory_of(importer_dir, policy.internal_name) == boundary.internal_dir:
        return BoundaryVerdict(allowed=True, reason=Reason.SAME_INTERNAL_DIR, **found)

    if not is_ancestor_or_equal(boundary.module_root, importer_dir):
        return BoundaryVerdict(allowed=False, reason=Reason.OUTSIDE_MODULE_ROOT, **found)

    depth = len(relative_segments(boundary.module_root, importer_dir))
    if policy.max_submodule_depth is not None and depth > policy.max_submodule_depth:
        return BoundaryVerdict(allowed=False, reason=Reason.SUBMODULE_DENIED, **found)

    return BoundaryVerdict(allowed=True, reason=Reason.WITHIN_MODULE_ROOT, **found)


def resolve_specifier(importer_file: str, specifier: str) -> str:
    """Resolve a relative *specifier* against the importer's directory."""
    return normalize(specifier, base=directory_of(importer_file))


def decide_import(
    importer_file: str,
    specifier: str,
    *,
    policy: BoundaryPolicy = DEFAULT_POLICY,
) -> BoundaryVerdict:
    """Decide for a literal import *specifier* written in *importer_file*.

    Package-style (non-relative) specifiers are never regulated.
    """
    if not is_relative_specifier(specifier):
        return BoundaryVerdict(allowed=True, reason=Reason.NOT_RELATIVE)
    return decide(importer_file, resolve_specifier(importer_file, specifier), policy=policy)
