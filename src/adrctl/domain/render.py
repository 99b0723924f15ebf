"""Creation-time template stamping.

A template is an ordinary ADR document with placeholder text.  Rendering
replaces the first top-level heading, every date line, and the status
carrier (when the template has one).  Everything else is copied as is.
"""

from __future__ import annotations

import re

from adrctl.domain.records import ADR
from adrctl.domain.rewrite import set_status

HEADING_PATTERN = re.compile(r"^# .*$", re.MULTILINE)
DATE_UPPER_PATTERN = re.compile(r"^Date:.*$", re.MULTILINE)
DATE_LOWER_PATTERN = re.compile(r"^date:.*$", re.MULTILINE)


def render_template(template: str, record: ADR) -> str:
    """Stamp *record* into *template*.

    Only the first ``# ...`` heading becomes ``# <number>. <title>``; later
    top-level headings are left alone.  Templates without a status
    carrier (minimal MADR) get no status injected.
    """
    heading = f"# {record.number}. {record.title}"
    date_text = record.date_text

    result = HEADING_PATTERN.sub(lambda _m: heading, template, count=1)
    result = DATE_UPPER_PATTERN.sub(lambda _m: f"Date: {date_text}", result)
    result = DATE_LOWER_PATTERN.sub(lambda _m: f"date: {date_text}", result)
    return set_status(result, record.status)
