"""Command: explain the boundary decision for one import."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gointernal.commands._base import GiCommand

if TYPE_CHECKING:
    from gointernal.commands._context import AppContext


@click.command(
    cls=GiCommand,
    examples="""\
  gointernal explain src/component.js ./internal/utils
  gointernal explain shop/handlers/order.js ../../payment/internal/service
  gointernal --json explain app/views.py ..internal.models""",
)
@click.argument("importer", type=click.Path(path_type=str))
@click.argument("specifier")
@click.pass_obj
def explain(app: AppContext, importer: str, specifier: str) -> None:
    """Explain whether IMPORTER may import SPECIFIER.

    SPECIFIER is the literal import string, or an absolute target path.
    The files do not need to exist.
    """
    from gointernal.services.explain import ExplainService

    app.emit(ExplainService(app.workspace).explain(importer, specifier))
