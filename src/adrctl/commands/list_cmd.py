"""Command: list ADRs (named list_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adrctl.commands._base import AdrCommand

if TYPE_CHECKING:
    from adrctl.commands._context import AppContext


@click.command(
    "list",
    cls=AdrCommand,
    examples="""\
  adrctl list
  adrctl list --search postgres
  adrctl list -s 12
  adrctl list --count
  adrctl --json list""",
)
@click.option("-s", "--search", default="", help="Filter by title substring or exact number.")
@click.option("--count", is_flag=True, help="Show the number of ADRs per status.")
@click.pass_obj
def list_cmd(app: AppContext, search: str, count: bool) -> None:
    """List all ADRs."""
    from adrctl.services.query import QueryService

    service = QueryService(app.workspace)
    if count:
        app.emit(service.count_by_status(query=search))
    else:
        app.emit(service.list_adrs(query=search))
