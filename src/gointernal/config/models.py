"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``gointernal.toml`` only holds
overrides. An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from gointernal.domain.boundary import INTERNAL_DIR_NAME
from gointernal.domain.decision import BoundaryPolicy

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
    ".ts",
    ".tsx",
    ".mts",
    ".cts",
    ".py",
    ".pyi",
)

DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    ".venv",
    "__pycache__",
    ".gointernal",
)


class BoundaryConfig(BaseModel):
    """[boundary] section."""

    model_config = {"frozen": True}

    internal_name: str = INTERNAL_DIR_NAME
    max_submodule_depth: int = Field(default=1, ge=0)
    enforce_submodule_depth: bool = True
    severity: Literal["error", "warning"] = "error"

    def to_policy(self) -> BoundaryPolicy:
        """Build the decision policy described by this section."""
        return BoundaryPolicy(
            internal_name=self.internal_name,
            max_submodule_depth=(
                self.max_submodule_depth if self.enforce_submodule_depth else None
            ),
        )


class ScanConfig(BaseModel):
    """[scan] section."""

    model_config = {"frozen": True}

    paths: tuple[str, ...] = (".",)
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    entry_points: bool = True
    local_dir: str = ".gointernal/plugins"
