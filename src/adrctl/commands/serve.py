"""serve — run the HTTP API over the project's ADR directory."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from adrctl.commands._base import AdrCommand

if TYPE_CHECKING:
    from adrctl.commands._context import AppContext


@click.command(
    cls=AdrCommand,
    examples="""\
  # Serve on the default address
  adrctl serve

  # Listen on all interfaces
  adrctl serve --host 0.0.0.0 --port 9000

  # Serve a built web UI next to the API
  adrctl serve --frontend web/dist""",
)
@click.option("--host", default="127.0.0.1", show_default=True, help="Bind address.")
@click.option("--port", default=8080, show_default=True, type=int, help="Listen port.")
@click.option(
    "--frontend",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory of a built web UI to serve alongside the API.",
)
@click.pass_obj
def serve(app: AppContext, host: str, port: int, frontend: Path | None) -> None:
    """Start the HTTP API server."""
    import uvicorn

    from adrctl.domain.errors import AdrError
    from adrctl.web.server import create_app

    try:
        repository = app.workspace.repository
    except AdrError as exc:
        app.fail("serve", exc)
        return

    web_app = create_app(
        repository, updater=repository, superseder=repository, frontend=frontend
    )
    click.echo(f"Serving ADRs from {repository.directory} on http://{host}:{port}", err=True)
    # Levels for the uvicorn loggers come from configure_logging.
    uvicorn.run(web_app, host=host, port=port, log_config=None)
