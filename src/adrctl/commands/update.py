"""Command: change the status of an ADR."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from adrctl.commands._base import AdrCommand
from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.domain.status import all_status_names

if TYPE_CHECKING:
    from adrctl.commands._context import AppContext

_OP = "update_status"


def _prompt_status() -> str:
    """Numbered status menu; returns the chosen name in lower case."""
    names = all_status_names()
    click.echo("Select a status:")
    for i, name in enumerate(names, start=1):
        click.echo(f"  {i}) {name}")
    line = str(click.prompt("Enter choice", default="", show_default=False)).strip()
    if not line.isdigit() or not 1 <= int(line) <= len(names):
        raise AdrError(ErrorKind.INVALID, f"invalid choice: {line!r}")
    return names[int(line) - 1].lower()


@click.command(
    cls=AdrCommand,
    examples="""\
  adrctl update 3 accepted
  adrctl update 3 Deprecated
  adrctl update 3            # pick from a menu""",
)
@click.argument("number", type=int, metavar="ID")
@click.argument("status", required=False)
@click.pass_obj
def update(app: AppContext, number: int, status: str | None) -> None:
    """Update the status of ADR ID.

    Without STATUS, a numbered menu is shown.  Setting ``superseded`` here
    adds no links; use ``adrctl new -s`` to supersede with references.
    """
    from adrctl.services.update import UpdateService

    if number <= 0:
        app.fail(_OP, AdrError(ErrorKind.INVALID, f"invalid ADR ID {number}: must be positive"))

    if status is None:
        try:
            # Fail on a missing ADR before asking anything
            app.workspace.repository.find_file(number)
            if app.settings.no_interact:
                msg = "status is required in non-interactive mode"
                raise AdrError(ErrorKind.INVALID, msg)
            status = _prompt_status()
        except AdrError as exc:
            app.fail(_OP, exc)
            return

    app.emit(UpdateService(app.workspace).update_status(number, status))
