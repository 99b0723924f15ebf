"""Terminal rendering of raw ADR markdown for ``adrctl show``.

Line-oriented, no markdown parser: headings are bold (the title also
cyan), frontmatter and date lines are dimmed, the line after
``## Status`` is colored by status category, ``-``/``*`` bullets become
``•``, and inline ``[label](target)`` links lose their brackets and are
styled.  Lines in the status section are left as written.
"""

from __future__ import annotations

import re

from rich.text import Text

from adrctl.output.console import style_for_status

LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")

_BULLET_PREFIXES = ("- ", "* ")


def _append_links(out: Text, line: str) -> None:
    """Append *line* to *out*, styling each inline link."""
    pos = 0
    for match in LINK_PATTERN.finditer(line):
        out.append(line[pos : match.start()])
        out.append(match.group(1), style="adr.link")
        out.append(f"({match.group(2)})", style="adr.link.target")
        pos = match.end()
    out.append(line[pos:])


def format_adr(content: str) -> Text:
    """Style *content* line by line for a terminal."""
    out = Text()
    in_frontmatter = False
    delimiters = 0
    after_status_heading = False

    for i, line in enumerate(content.split("\n")):
        if i:
            out.append("\n")
        trimmed = line.strip()

        if trimmed == "---":
            delimiters += 1
            if delimiters <= 2:
                in_frontmatter = delimiters == 1
            out.append(line, style="adr.dim")
            continue

        if in_frontmatter:
            out.append(line, style="adr.dim")
            continue

        if trimmed.startswith("# "):
            after_status_heading = False
            out.append(line, style="adr.h1")
            continue

        if trimmed.startswith("## "):
            after_status_heading = trimmed[3:].strip().lower() == "status"
            out.append(line, style="adr.heading")
            continue

        if trimmed.startswith("### "):
            out.append(line, style="adr.heading")
            continue

        if trimmed.startswith(("Date:", "date:")):
            out.append(line, style="adr.dim")
            continue

        if after_status_heading and trimmed:
            out.append(line, style=style_for_status(trimmed))
            continue

        if trimmed.startswith(_BULLET_PREFIXES):
            indent = line[: len(line) - len(line.lstrip(" \t"))]
            out.append(indent + "• ")
            _append_links(out, line.lstrip(" \t")[2:])
            continue

        _append_links(out, line)

    return out
