"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from adrctl.output.console import create_console, get_output, style_for_status
from adrctl.output.markdown import format_adr

if TYPE_CHECKING:
    from rich.console import Console

    from adrctl.services.result import ServiceError, ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, color: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) unless *color* is set, which is what
    Click's CliRunner and piped output want.
    """
    console = create_console(color=color)

    if result.error is not None:
        _render_error(result.op, result.error, console, verbose=verbose)
    else:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if result.error is not None:
        return f"ERROR: {result.op}: {result.error.message}"

    # Lists print one ADR number per line
    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["number"]) for item in items if "number" in item)
    if "path" in result.data:
        return str(result.data["path"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="adr.ok")
    op = Text(f"  {result.op}", style="adr.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="adr.key")
    if key == "number" or key.endswith("_by"):
        v = Text(f"{value:04d}" if isinstance(value, int) else str(value), style="adr.id")
    elif key in ("path", "file", "config", "template_file"):
        v = Text(str(value), style="adr.path")
    elif key == "title":
        v = Text(str(value), style="adr.title")
    elif key == "status":
        v = Text(str(value), style=style_for_status(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including service timing (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            console.print(f"    [dim]{v['duration_ms']:>8.2f}ms[/dim]  {v['name']}")
        else:
            console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(op: str, err: ServiceError, console: Console, *, verbose: bool = False) -> None:
    label = Text("ERROR", style="adr.error")
    console.print(label, Text(f"  {op}", style="adr.op"), Text(": "), err.message, sep="")

    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create/update/supersede results."""
    _status_line(console, result)
    for key in ("number", "title", "status", "date", "path", "superseded_by"):
        if key in result.data and result.data[key] != "":
            _field(console, key, result.data[key])
    for path in result.data.get("superseded", []):
        _field(console, "superseded", path)
    if verbose:
        _render_meta(console, result)


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render init result."""
    _status_line(console, result)
    for key in ("directory", "template", "template_file", "config"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


# ── Query renderers ───────────────────────────────────────────────────


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_adrs as an ID / Date / Title / Status table."""
    items = result.data.get("items", [])
    if not items:
        console.print("No ADRs found.")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False, box=None)
    table.add_column("ID", style="adr.id", no_wrap=True)
    table.add_column("Date", style="dim", no_wrap=True)
    table.add_column("Title", style="adr.title")
    table.add_column("Status")
    for item in items:
        status = str(item.get("status", ""))
        table.add_row(
            f"{item['number']:04d}",
            str(item.get("date", "")),
            str(item.get("title", "")),
            Text(status, style=style_for_status(status)),
        )
    console.print(table)
    if verbose:
        console.print(f"\n{result.data.get('count', len(items))} ADRs")
        _render_meta(console, result)


def _render_counts(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render count_by_status as a Status / Count table with a total."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False, box=None)
    table.add_column("Status")
    table.add_column("Count", justify="right")
    for status, count in result.data.get("by_status", {}).items():
        table.add_row(Text(status, style=style_for_status(status)), str(count))
    table.add_section()
    table.add_row(Text("Total", style="bold"), str(result.data.get("total", 0)))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single ADR document."""
    console.print(format_adr(str(result.data.get("content", "")).rstrip("\n")))
    if verbose:
        console.print()
        _field(console, "file", result.data.get("file", ""))
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "init": _render_init,
    "create_adr": _render_mutation,
    "update_status": _render_mutation,
    "supersede": _render_mutation,
    # Query
    "list_adrs": _render_list,
    "count_by_status": _render_counts,
    "show": _render_show,
}
