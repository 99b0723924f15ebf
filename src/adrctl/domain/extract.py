"""Best-effort metadata extraction from raw ADR markdown.

Never raises: any field that cannot be found is left empty, and the
record assembler decides what an empty field means.
"""

from __future__ import annotations

import re

from adrctl.domain.frontmatter import body_after_frontmatter, extract_frontmatter, strip_quotes
from adrctl.domain.records import Metadata
from adrctl.domain.rewrite import detect_dialect

NUMBERED_HEADING_PATTERN = re.compile(r"^# (\d+)\.\s+(.+)$", re.MULTILINE)
PLAIN_HEADING_PATTERN = re.compile(r"^# (.+)$", re.MULTILINE)
BODY_DATE_PATTERN = re.compile(r"^[Dd]ate:\s*(.+)$", re.MULTILINE)
FRONTMATTER_DATE_PATTERN = re.compile(r"^date:\s*(.+)$", re.MULTILINE)


def extract_metadata(content: str) -> Metadata:
    """Pull number, title, status text and date text out of *content*."""
    number = 0
    title = ""
    if match := NUMBERED_HEADING_PATTERN.search(content):
        number = int(match.group(1))
        title = match.group(2).strip()
    elif match := PLAIN_HEADING_PATTERN.search(content):
        title = match.group(1).strip()

    dialect = detect_dialect(content)
    status = dialect.extract_status(content) if dialect is not None else ""

    # A body Date: line beats a frontmatter date: key.
    date = ""
    if match := BODY_DATE_PATTERN.search(body_after_frontmatter(content)):
        date = match.group(1).strip()
    elif match := FRONTMATTER_DATE_PATTERN.search(extract_frontmatter(content)):
        date = strip_quotes(match.group(1).strip())

    return Metadata(
        number=number,
        title=title,
        status=status,
        date=date,
        dialect=dialect.name if dialect is not None else "",
    )
