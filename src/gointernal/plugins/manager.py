"""Plugin discovery and loading.

Discovery: built-in extractors, entry points (pip-installed) via pluggy's
setuptools entry-point loader, plus local single-file plugins from
``.gointernal/plugins/``.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from typing import TYPE_CHECKING

import pluggy

from gointernal.plugins.hookspecs import GointernalHookSpec

if TYPE_CHECKING:
    from pathlib import Path
    from types import ModuleType

    from gointernal.domain.sites import ImportSite

PROJECT_NAME = "gointernal"
ENTRY_POINT_GROUP = "gointernal.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(GointernalHookSpec)
        self._loaded: bool = False

    def register_builtins(self) -> None:
        """Register the built-in Python and ECMAScript extractors."""
        from gointernal.plugins.builtins.ecmascript_imports import EcmascriptImportsPlugin
        from gointernal.plugins.builtins.python_imports import PythonImportsPlugin

        for plugin in (EcmascriptImportsPlugin(), PythonImportsPlugin()):
            name = plugin.__class__.__name__
            if self._pm.get_plugin(name) is None:
                self.register_plugin(plugin, name=name)

    def discover_and_load(
        self,
        *,
        local_dir: Path | None = None,
        entry_points: bool = True,
    ) -> list[str]:
        """Register built-ins, then discover entry-point and local plugins.

        Returns a list of loaded plugin names.
        """
        self.register_builtins()
        if entry_points:
            self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
            self._normalize_plugin_instances()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        """Return names of all registered plugins, sorted."""
        return sorted(
            self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()
        )

    def extract_import_sites(self, path: Path, source: str) -> list[ImportSite]:
        """Collect import sites for *path* from every plugin that handles it.

        Exceptions raised by a plugin (including ``SourceSyntaxError``)
        propagate to the caller.
        """
        results = self._pm.hook.extract_import_sites(path=path, source=source)
        sites: list[ImportSite] = []
        for chunk in results:
            sites.extend(chunk)
        return sorted(sites, key=lambda s: (s.line, s.column))

    # -- local and entry-point plugins ----------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Register hook classes found in ``local_dir/*.py``.

        Files starting with ``_`` are skipped. A file that fails to import,
        or a class that fails to instantiate, is logged and skipped.
        """
        if not local_dir.is_dir():
            return

        for source_file in sorted(local_dir.glob("*.py")):
            if source_file.name.startswith("_"):
                continue
            module = _load_module(f"gointernal_local_plugin_{source_file.stem}", source_file)
            if module is None:
                continue
            for cls in _hook_classes(module):
                plugin = _instantiate(cls, origin=str(source_file))
                if plugin is not None:
                    self.register_plugin(plugin, name=f"{module.__name__}.{cls.__name__}")

    def _normalize_plugin_instances(self) -> None:
        """Swap entry-point classes for instances so hooks get a bound ``self``."""
        for plugin in self._pm.get_plugins():
            if not (inspect.isclass(plugin) and self._has_hook_impls(plugin)):
                continue
            name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            instance = _instantiate(plugin, origin=f"entry point {name}")
            if instance is not None:
                self._pm.register(instance, name=name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has a public method marked with ``@hookimpl``."""
        return any(
            getattr(getattr(cls, attr, None), f"{PROJECT_NAME}_impl", None)
            for attr in dir(cls)
            if not attr.startswith("_")
        )


def _load_module(module_name: str, path: Path) -> ModuleType | None:
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        logger.warning("Cannot load plugin file %s", path)
        return None
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception:
        sys.modules.pop(module_name, None)
        logger.warning("Skipping local plugin %s", path, exc_info=True)
        return None
    return module


def _hook_classes(module: ModuleType) -> list[type]:
    """Classes defined in *module* itself that carry hook implementations."""
    return [
        obj
        for _, obj in inspect.getmembers(module, inspect.isclass)
        if obj.__module__ == module.__name__ and PluginManager._has_hook_impls(obj)
    ]


def _instantiate(cls: type, *, origin: str) -> object | None:
    try:
        return cls()
    except Exception:
        logger.warning("Cannot instantiate plugin %s (%s)", cls.__name__, origin, exc_info=True)
        return None
