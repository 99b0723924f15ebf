"""Command: project initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from adrctl.commands._base import AdrCommand
from adrctl.config.models import DEFAULT_TEMPLATE_FILE, TemplateName, valid_template_names

if TYPE_CHECKING:
    from adrctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  adrctl init
  adrctl init docs/adr
  adrctl init docs/decisions --template madr-full
  adrctl init docs/adr --template-file adr-template.md --force"""


@click.command("init", cls=AdrCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option(
    "-t",
    "--template",
    default=str(TemplateName.NYGARD),
    show_default=True,
    help=f"Template format ({', '.join(valid_template_names())}).",
)
@click.option(
    "--template-file",
    default=DEFAULT_TEMPLATE_FILE,
    show_default=True,
    help="File name for the template inside the ADR directory.",
)
@click.option("-f", "--force", is_flag=True, help="Overwrite an existing config or template.")
@click.pass_obj
def init_cmd(app: AppContext, path: str, template: str, template_file: str, force: bool) -> None:
    """Initialize an ADR directory with a template.

    Writes the template into PATH (default: current directory) and
    ``.adr.json`` into the current directory.
    """
    from adrctl.services.init import InitService

    app.emit(
        InitService.init_project(
            Path.cwd(),
            directory=path,
            template=template,
            template_file=template_file,
            force=force,
        )
    )
