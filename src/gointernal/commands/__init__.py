"""Subcommand modules for gointernal.

register_commands() imports each command lazily so ``gointernal --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gointernal.commands.check import check
    from gointernal.commands.explain import explain
    from gointernal.commands.plugins import plugins

    cli.add_command(check)
    cli.add_command(explain)
    cli.add_command(plugins)
