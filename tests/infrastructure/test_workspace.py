"""Tests for Workspace — project root, discovery, and plugin wiring."""

from __future__ import annotations

from pathlib import Path

import pytest

from gointernal.config.settings import GointernalSettings
from gointernal.infrastructure.workspace import Workspace
from gointernal.plugins.manager import PluginManager


class TestWorkspace:
    def test_root_is_project_root(self, workspace: Workspace, project_root: Path) -> None:
        assert workspace.root == project_root

    def test_policy_from_settings(self, project_root: Path) -> None:
        (project_root / "gointernal.toml").write_text("[boundary]\nmax_submodule_depth = 3\n")
        ws = Workspace(GointernalSettings.from_cli(project_root=project_root))
        assert ws.policy.max_submodule_depth == 3

    def test_resolve(self, workspace: Workspace, project_root: Path) -> None:
        assert workspace.resolve("src") == project_root / "src"
        assert workspace.resolve("/abs/path") == Path("/abs/path")

    def test_display_path(self, workspace: Workspace, project_root: Path) -> None:
        assert workspace.display_path(project_root / "src" / "app.js") == "src/app.js"
        assert workspace.display_path(Path("/elsewhere/x.js")) == "/elsewhere/x.js"


class TestFindSources:
    def test_configured_paths(self, workspace: Workspace, project_root: Path) -> None:
        found = workspace.find_sources()
        assert [workspace.display_path(p) for p in found] == [
            "other/main.js",
            "src/app.js",
            "src/feature/deep/x.js",
            "src/feature/view.js",
            "src/internal/utils.js",
        ]

    def test_configured_paths_relative_to_root(
        self,
        project_root: Path,
        monkeypatch: pytest.MonkeyPatch,
        tmp_path_factory: pytest.TempPathFactory,
    ) -> None:
        (project_root / "gointernal.toml").write_text('[scan]\npaths = ["other"]\n')
        ws = Workspace(GointernalSettings.from_cli(project_root=project_root))
        monkeypatch.chdir(tmp_path_factory.mktemp("elsewhere"))
        assert [ws.display_path(p) for p in ws.find_sources()] == ["other/main.js"]

    def test_explicit_paths_relative_to_cwd(
        self, workspace: Workspace, project_root: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(project_root / "src")
        found = workspace.find_sources(["feature"])
        assert [workspace.display_path(p) for p in found] == [
            "src/feature/deep/x.js",
            "src/feature/view.js",
        ]


class TestPluginWiring:
    def test_lazy_plugin_manager(self, workspace: Workspace) -> None:
        pm = workspace.plugin_manager
        assert pm.is_loaded
        assert workspace.plugin_manager is pm

    def test_local_plugins_from_project(self, project_root: Path) -> None:
        plugin_dir = project_root / ".gointernal" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "noop.py").write_text(
            "import pluggy\n"
            "hookimpl = pluggy.HookimplMarker('gointernal')\n"
            "class NoopPlugin:\n"
            "    @hookimpl\n"
            "    def post_check(self, files_checked, violations):\n"
            "        pass\n"
        )
        settings = GointernalSettings.from_cli(
            project_root=project_root, plugins={"entry_points": False}
        )
        names = Workspace(settings).plugin_manager.list_plugin_names()
        assert "gointernal_local_plugin_noop.NoopPlugin" in names

    def test_injected_manager_gets_builtins(self, workspace: Workspace) -> None:
        ws = Workspace(workspace.settings, plugin_manager=PluginManager())
        assert ws.plugin_manager.list_plugin_names() == [
            "EcmascriptImportsPlugin",
            "PythonImportsPlugin",
        ]

    def test_import_sites(self, workspace: Workspace, project_root: Path) -> None:
        sites = workspace.import_sites(project_root / "src" / "app.js")
        assert [s.specifier for s in sites] == ["./internal/utils"]
