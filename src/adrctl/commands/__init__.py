"""Subcommand modules for adrctl.

Provides register_commands() which uses deferred imports to keep
``adrctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from adrctl.commands.init_cmd import init_cmd
    from adrctl.commands.list_cmd import list_cmd
    from adrctl.commands.new import new
    from adrctl.commands.serve import serve
    from adrctl.commands.show import show
    from adrctl.commands.update import update

    cli.add_command(init_cmd)
    cli.add_command(new)
    cli.add_command(update)
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(serve)
