"""Workspace — the single dependency injected into every service.

Owns the resolved settings, the project root and a lazily loaded plugin
manager. Holds no per-check state, so one workspace can serve any number
of check runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from gointernal.infrastructure.filesystem import find_source_files, read_source
from gointernal.plugins.manager import PluginManager

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gointernal.config.settings import GointernalSettings
    from gointernal.domain.decision import BoundaryPolicy
    from gointernal.domain.sites import ImportSite

logger = logging.getLogger(__name__)


class Workspace:
    """Project checked by gointernal."""

    def __init__(
        self,
        settings: GointernalSettings,
        *,
        plugin_manager: PluginManager | None = None,
    ) -> None:
        self.settings = settings
        self.root = settings.project_root.absolute()
        self._plugin_manager = plugin_manager

    @property
    def policy(self) -> BoundaryPolicy:
        """Decision policy from the ``[boundary]`` section."""
        return self.settings.boundary.to_policy()

    @property
    def plugin_manager(self) -> PluginManager:
        """Plugin manager, discovered and loaded on first access."""
        if self._plugin_manager is None:
            pm = PluginManager()
            cfg = self.settings.plugins
            names = pm.discover_and_load(
                local_dir=self.resolve(cfg.local_dir),
                entry_points=cfg.entry_points,
            )
            logger.debug("Loaded plugins: %s", ", ".join(names))
            self._plugin_manager = pm
        elif not self._plugin_manager.is_loaded:
            self._plugin_manager.register_builtins()
        return self._plugin_manager

    def resolve(self, path: str | Path) -> Path:
        """Resolve *path* against the project root (absolute paths pass through)."""
        candidate = Path(path)
        if candidate.is_absolute():
            return candidate
        return self.root / candidate

    def display_path(self, path: Path) -> str:
        """Project-relative POSIX path when *path* is inside the root."""
        try:
            return path.relative_to(self.root).as_posix()
        except ValueError:
            return path.as_posix()

    def find_sources(self, paths: Iterable[str | Path] | None = None) -> list[Path]:
        """Discover source files under *paths* (default: ``[scan] paths``).

        Explicit *paths* are relative to the CWD; configured ones are
        relative to the project root.
        """
        scan = self.settings.scan
        if paths:
            roots = [Path(p).absolute() for p in paths]
        else:
            roots = [self.resolve(p) for p in scan.paths]
        return find_source_files(
            roots,
            extensions=scan.extensions,
            exclude_dirs=scan.exclude_dirs,
        )

    def import_sites(self, path: Path) -> list[ImportSite]:
        """Read *path* and extract its import sites through the plugins."""
        return self.plugin_manager.extract_import_sites(path, read_source(path))
