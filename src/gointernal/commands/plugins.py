"""Command: list registered plugins."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gointernal.commands._base import GiCommand

if TYPE_CHECKING:
    from gointernal.commands._context import AppContext


@click.command(
    cls=GiCommand,
    examples="""\
  gointernal plugins
  gointernal -q plugins""",
)
@click.pass_obj
def plugins(app: AppContext) -> None:
    """List import extractors and lifecycle plugins in use."""
    from gointernal.services.plugins import PluginService

    app.emit(PluginService(app.workspace).list_plugins())
