"""BoundaryCheckService — lint source trees for internal-boundary violations.

Single command following the linter pattern: discover files, extract
import sites through the plugins, decide each site, report the denied
ones. Files are never modified and there is no autofix.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gointernal.domain.decision import RULE_ID, VIOLATION_MESSAGE, decide_import, resolve_specifier
from gointernal.domain.paths import normalize
from gointernal.domain.sites import SourceSyntaxError
from gointernal.services.base import BaseService
from gointernal.services.result import ServiceError, ServiceResult
from gointernal.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from collections.abc import Sequence

    from gointernal.domain.decision import BoundaryVerdict
    from gointernal.domain.sites import ImportSite

logger = logging.getLogger(__name__)

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"

CAT_BOUNDARY = "internal_boundary"

_SEVERITY_RANK = {SEVERITY_WARNING: 0, SEVERITY_ERROR: 1}


class BoundaryCheckService(BaseService):
    """Checks every import in a set of source files against the boundary rule."""

    @traced
    def check(
        self,
        paths: Sequence[str | Path] | None = None,
        *,
        min_severity: str = SEVERITY_WARNING,
    ) -> ServiceResult:
        """Report boundary violations under *paths* (default: configured paths)."""
        try:
            with trace_span("discover") as span:
                files = self._workspace.find_sources(paths)
                if span:
                    span.annotate("files", len(files))
        except FileNotFoundError as exc:
            return ServiceResult(
                ok=False,
                op="check",
                error=ServiceError(
                    code="PATH_NOT_FOUND",
                    message=str(exc),
                    detail={"paths": [str(p) for p in paths or ()]},
                ),
            )

        warnings: list[str] = []
        issues: list[dict[str, Any]] = []
        imports_checked = 0

        with trace_span("decide") as span:
            for path in files:
                sites = self._read_sites(path, warnings)
                if sites is None:
                    continue
                importer = normalize(path.as_posix())
                for site in sites:
                    imports_checked += 1
                    verdict = decide_import(importer, site.specifier, policy=self._workspace.policy)
                    if not verdict.allowed:
                        issues.append(self._issue(path, importer, site, verdict))
            if span:
                span.annotate("imports", imports_checked)

        threshold = _SEVERITY_RANK.get(min_severity, 0)
        issues = [i for i in issues if _SEVERITY_RANK.get(i["severity"], 0) >= threshold]
        error_count = sum(1 for i in issues if i["severity"] == SEVERITY_ERROR)

        self._dispatch_event(
            "post_check",
            {"files_checked": len(files), "violations": len(issues)},
            warnings,
        )
        logger.debug(
            "Checked %d files, %d imports, %d violations",
            len(files),
            imports_checked,
            len(issues),
        )

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "issues": issues,
                "count": len(issues),
                "error_count": error_count,
                "warning_count": len(issues) - error_count,
                "files_checked": len(files),
                "imports_checked": imports_checked,
                "healthy": error_count == 0,
            },
            warnings=warnings,
        )

    def _read_sites(self, path: Path, warnings: list[str]) -> list[ImportSite] | None:
        """Extract import sites, turning unreadable files into warnings."""
        shown = self._workspace.display_path(path)
        try:
            return self._workspace.import_sites(path)
        except SourceSyntaxError as exc:
            where = f"{shown}:{exc.line}" if exc.line is not None else shown
            warnings.append(f"Skipped {where}: {exc.detail}")
        except (OSError, UnicodeDecodeError) as exc:
            warnings.append(f"Skipped {shown}: {exc}")
        return None

    def _issue(
        self,
        path: Path,
        importer: str,
        site: ImportSite,
        verdict: BoundaryVerdict,
    ) -> dict[str, Any]:
        target = resolve_specifier(importer, site.specifier)
        return {
            "rule": RULE_ID,
            "category": CAT_BOUNDARY,
            "severity": self._workspace.settings.boundary.severity,
            "path": self._workspace.display_path(path),
            "line": site.line,
            "column": site.column,
            "kind": str(site.kind),
            "specifier": site.specifier,
            "target": self._workspace.display_path(Path(target)),
            "reason": str(verdict.reason),
            "message": VIOLATION_MESSAGE,
        }
