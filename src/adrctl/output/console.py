"""Rich Console factory and theme for adrctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  Colors are emitted only when
the caller asks for them (``color=True``); tests and pipes get plain text.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

from adrctl.domain.status import StatusCategory, parse_status

ADR_THEME = Theme(
    {
        "adr.ok": "bold green",
        "adr.error": "bold red",
        "adr.warning": "bold yellow",
        "adr.op": "bold cyan",
        "adr.key": "dim",
        "adr.id": "bold blue",
        "adr.path": "dim",
        "adr.title": "bold",
        "adr.h1": "bold cyan",
        "adr.heading": "bold",
        "adr.dim": "dim",
        "adr.link": "underline blue",
        "adr.link.target": "dim",
        "adr.status.pending": "yellow",
        "adr.status.active": "green",
        "adr.status.inactive": "red",
    }
)

_CATEGORY_STYLES: dict[StatusCategory, str] = {
    StatusCategory.PENDING: "adr.status.pending",
    StatusCategory.ACTIVE: "adr.status.active",
    StatusCategory.INACTIVE: "adr.status.inactive",
}


def create_console(
    *, no_color: bool = False, color: bool = False, width: int | None = None
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes entirely.
        color: Force ANSI styling even though the buffer is not a TTY.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ADR_THEME,
        no_color=no_color,
        force_terminal=True if color and not no_color else None,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(text: str) -> str:
    """Rich style name for a status line, by category; ``""`` if unknown."""
    status = parse_status(text)
    if status is None:
        return ""
    return _CATEGORY_STYLES[status.category]
