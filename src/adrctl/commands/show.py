"""Command: display a single ADR."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adrctl.commands._base import AdrCommand

if TYPE_CHECKING:
    from adrctl.commands._context import AppContext


@click.command(
    cls=AdrCommand,
    examples="""\
  adrctl show 3
  adrctl --plain show 3
  adrctl --json show 3""",
)
@click.argument("number", type=int, metavar="ID")
@click.pass_obj
def show(app: AppContext, number: int) -> None:
    """Show ADR ID with terminal formatting."""
    from adrctl.domain.errors import AdrError, ErrorKind
    from adrctl.services.query import QueryService

    if number <= 0:
        app.fail("show", AdrError(ErrorKind.INVALID, f"invalid ADR ID {number}: must be positive"))

    app.emit(QueryService(app.workspace).get(number))
