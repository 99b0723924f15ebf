"""Command: create a new ADR from the project template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adrctl.commands._base import AdrCommand

if TYPE_CHECKING:
    from adrctl.commands._context import AppContext


def _parse_ids(
    _ctx: click.Context, param: click.Parameter, values: tuple[str, ...]
) -> list[int]:
    """Accept ``-s 1 -s 2`` as well as ``-s 1,2``."""
    ids: list[int] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if not part:
                continue
            try:
                ids.append(int(part))
            except ValueError:
                msg = f"{part!r} is not a valid ADR number"
                raise click.BadParameter(msg, param=param) from None
    return ids


@click.command(
    cls=AdrCommand,
    examples="""\
  adrctl new "Use PostgreSQL for persistence"
  adrctl new "Switch to SQLite" -s 3
  adrctl new "Consolidate storage" -s 3 -s 5
  adrctl new "Consolidate storage" --supersedes 3,5""",
)
@click.argument("title")
@click.option(
    "-s",
    "--supersedes",
    multiple=True,
    callback=_parse_ids,
    metavar="ID",
    help="Number of an ADR this one supersedes (repeatable).",
)
@click.pass_obj
def new(app: AppContext, title: str, supersedes: list[int]) -> None:
    """Create a new ADR titled TITLE."""
    from adrctl.services.create import CreateService

    app.emit(CreateService(app.workspace).create_adr(title, supersedes=supersedes))
