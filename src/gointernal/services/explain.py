"""ExplainService — show how a single import is decided.

Useful when a check result is surprising: it reports the resolved
target, the governing internal directory, the module root and the
reason code that ended the decision.
"""

from __future__ import annotations

from pathlib import Path

from gointernal.domain.decision import (
    VIOLATION_MESSAGE,
    decide,
    decide_import,
    is_relative_specifier,
    resolve_specifier,
)
from gointernal.domain.paths import directory_of, is_absolute, normalize
from gointernal.services.base import BaseService
from gointernal.services.result import ServiceError, ServiceResult
from gointernal.services.telemetry import traced


class ExplainService(BaseService):
    """Decides one importer/import pair and reports every intermediate value."""

    @traced
    def explain(self, importer: str, specifier: str) -> ServiceResult:
        """Explain the verdict for *specifier* written in the file *importer*.

        *specifier* may be a literal import string (``./internal/x``,
        ``lodash``) or an absolute target path.
        """
        if not specifier:
            return ServiceResult(
                ok=False,
                op="explain",
                error=ServiceError(code="EMPTY_SPECIFIER", message="Import specifier is empty"),
            )

        policy = self._workspace.policy
        importer_file = normalize(Path(importer).absolute().as_posix())

        target: str | None
        if is_absolute(specifier):
            target = normalize(specifier)
            verdict = decide(importer_file, target, policy=policy)
        else:
            target = (
                resolve_specifier(importer_file, specifier)
                if is_relative_specifier(specifier)
                else None
            )
            verdict = decide_import(importer_file, specifier, policy=policy)

        data = {
            "importer": importer_file,
            "importer_dir": directory_of(importer_file),
            "specifier": specifier,
            "target": target,
            "allowed": verdict.allowed,
            "reason": str(verdict.reason),
            "internal_dir": verdict.internal_dir,
            "module_root": verdict.module_root,
            "internal_name": policy.internal_name,
            "max_submodule_depth": policy.max_submodule_depth,
        }
        if not verdict.allowed:
            data["message"] = VIOLATION_MESSAGE
        return ServiceResult(ok=True, op="explain", data=data)
