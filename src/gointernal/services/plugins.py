"""PluginService — report which extractor and lifecycle plugins are active."""

from __future__ import annotations

from gointernal.services.base import BaseService
from gointernal.services.result import ServiceResult


class PluginService(BaseService):
    """Lists registered plugins."""

    def list_plugins(self) -> ServiceResult:
        names = self._workspace.plugin_manager.list_plugin_names()
        return ServiceResult(
            ok=True,
            op="list_plugins",
            data={"items": [{"id": name} for name in names], "count": len(names)},
        )
