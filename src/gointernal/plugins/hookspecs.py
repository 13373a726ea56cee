"""Pluggy hook specifications for gointernal.

One extraction hook turns a source file into import sites; any plugin
able to yield ``(position, literal specifier)`` pairs for some language
can implement it. One lifecycle hook reports finished check runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from pathlib import Path

    from gointernal.domain.sites import ImportSite

hookspec = pluggy.HookspecMarker("gointernal")
hookimpl = pluggy.HookimplMarker("gointernal")


class GointernalHookSpec:
    """Hook specifications for the gointernal plugin system."""

    @hookspec
    def extract_import_sites(self, path: Path, source: str) -> list[ImportSite] | None:
        """Return the import sites in *source*, or None if *path* is not handled.

        Raise :class:`~gointernal.domain.sites.SourceSyntaxError` when the
        file belongs to the plugin's language but cannot be parsed.
        """

    @hookspec
    def post_check(self, files_checked: int, violations: int) -> None:
        """Called after a boundary check run."""
