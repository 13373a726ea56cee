"""Pure boundary logic: path operations, boundary resolution, and decisions.

Nothing in this package touches the filesystem; relative paths are
anchored at the current working directory.
"""

from gointernal.domain.boundary import (
    INTERNAL_DIR_NAME,
    Boundary,
    find_last_internal_segment_index,
    internal_directory_of,
    module_root_of,
    resolve_boundary,
)
from gointernal.domain.decision import (
    RULE_ID,
    VIOLATION_MESSAGE,
    BoundaryPolicy,
    BoundaryVerdict,
    Reason,
    decide,
    decide_import,
    is_relative_specifier,
)
from gointernal.domain.sites import ImportKind, ImportSite, SourceSyntaxError

__all__ = [
    "INTERNAL_DIR_NAME",
    "RULE_ID",
    "VIOLATION_MESSAGE",
    "Boundary",
    "BoundaryPolicy",
    "BoundaryVerdict",
    "ImportKind",
    "ImportSite",
    "Reason",
    "SourceSyntaxError",
    "decide",
    "decide_import",
    "find_last_internal_segment_index",
    "internal_directory_of",
    "is_relative_specifier",
    "module_root_of",
    "resolve_boundary",
]
