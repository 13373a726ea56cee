"""Shared pytest fixtures and test helpers for gointernal tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from gointernal.config.settings import GointernalSettings
from gointernal.infrastructure.workspace import Workspace
from gointernal.services.telemetry import disable_telemetry

WriteSource = Callable[[str, str], Path]


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep GOINTERNAL_* variables, telemetry and log handlers test-local."""
    monkeypatch.delenv("GOINTERNAL_CONFIG", raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    disable_telemetry()
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project tree with one internal boundary.

    Layout::

        gointernal.toml
        src/
          app.js               ./internal/utils     (allowed)
          feature/view.js      ../internal/utils    (allowed, depth 1)
          feature/deep/x.js    ../../internal/utils (denied, depth 2)
          internal/utils.js
        other/
          main.js              ../src/internal/utils (denied, outside)
    """
    (tmp_path / "gointernal.toml").write_text("")
    files = {
        "src/app.js": "import { helper } from './internal/utils';\n",
        "src/feature/view.js": "import { helper } from '../internal/utils';\n",
        "src/feature/deep/x.js": "const u = require('../../internal/utils');\n",
        "src/internal/utils.js": "export function helper() {}\n",
        "other/main.js": "import { helper } from '../src/internal/utils';\n",
    }
    for rel, text in files.items():
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
    return tmp_path


@pytest.fixture
def write_source(tmp_path: Path) -> WriteSource:
    """Return a helper writing ``text`` to ``tmp_path / rel`` (parents created)."""

    def _write(rel: str, text: str) -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def workspace(project_root: Path) -> Workspace:
    """Workspace over the sample project, with entry-point discovery off."""
    settings = GointernalSettings.from_cli(
        project_root=project_root,
        plugins={"entry_points": False},
    )
    return Workspace(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.setenv("GOINTERNAL_PLUGINS__ENTRY_POINTS", "false")
    monkeypatch.chdir(project_root)
