"""Frontmatter boundary detection.

A document has frontmatter only if its first line is exactly ``---`` and a
later line is exactly ``---``.  Without the closing delimiter the leading
``---`` is ordinary body text.

These helpers locate the block by offsets instead of splitting and
re-joining, so callers can rewrite inside the block and leave every other
byte of the document as it was.
"""

from __future__ import annotations

_DELIMITER = "---"


def frontmatter_bounds(content: str) -> tuple[int, int, int] | None:
    """Locate the frontmatter block.

    Returns:
        ``(start, end, after)`` where ``content[start:end]`` is the text
        between the delimiter lines and ``content[after:]`` is the body
        following the closing delimiter line.  None if there is no block.
    """
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != _DELIMITER:
        return None

    start = len(lines[0])
    offset = start
    for line in lines[1:]:
        if line.rstrip("\r\n") == _DELIMITER:
            return start, offset, offset + len(line)
        offset += len(line)
    return None


def extract_frontmatter(content: str) -> str:
    """Text inside the frontmatter block, or ``""``."""
    bounds = frontmatter_bounds(content)
    if bounds is None:
        return ""
    start, end, _after = bounds
    return content[start:end]


def body_after_frontmatter(content: str) -> str:
    """Everything after the closing delimiter, or the whole document."""
    bounds = frontmatter_bounds(content)
    if bounds is None:
        return content
    return content[bounds[2] :]


def strip_quotes(value: str) -> str:
    """Remove one pair of surrounding double quotes."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value
