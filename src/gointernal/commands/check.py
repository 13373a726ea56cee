"""Command: lint source files for internal-boundary violations."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gointernal.commands._base import GiCommand

if TYPE_CHECKING:
    from gointernal.commands._context import AppContext


@click.command(
    cls=GiCommand,
    examples="""\
  gointernal check
  gointernal check src/ packages/web
  gointernal check --errors-only
  gointernal --json check src/app.ts
  gointernal -q check""",
)
@click.argument("paths", nargs=-1, type=click.Path(path_type=str))
@click.option(
    "--min-severity",
    type=click.Choice(["warning", "error"]),
    default="warning",
    help="Hide issues below this severity.",
)
@click.option("--errors-only", is_flag=True, help="Shortcut for --min-severity error.")
@click.pass_obj
def check(app: AppContext, paths: tuple[str, ...], min_severity: str, errors_only: bool) -> None:
    """Check imports against internal/ boundaries.

    PATHS are files or directories (default: the configured scan paths).
    Exits 1 when any error-severity violation is found.
    """
    from gointernal.services.check import BoundaryCheckService

    threshold = "error" if errors_only else min_severity
    result = BoundaryCheckService(app.workspace).check(list(paths) or None, min_severity=threshold)
    app.emit(result)
    if not result.data.get("healthy", True):
        raise SystemExit(1)
