"""ADR record model and the metadata -> record assembler.

The record is frozen; changing an ADR means rewriting its text and
assembling a new record from the result.
"""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.domain.status import Status, parse_status

DATE_FORMAT = "%Y-%m-%d"
MADR_DIALECT = "madr"
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True)
class Metadata:
    """Raw strings pulled out of a document; any field may be empty.

    *dialect* names the status carrier the status text came from
    (``"nygard"`` or ``"madr"``).
    """

    number: int = 0
    title: str = ""
    status: str = ""
    date: str = ""
    dialect: str = ""


class ADR(BaseModel):
    """An Architecture Decision Record."""

    model_config = {"frozen": True}

    number: int
    title: str
    status: Status = Status.PROPOSED
    date: dt.date | None = None
    content: str | None = None

    @classmethod
    def new(cls, number: int, title: str) -> ADR:
        """A fresh Proposed record dated today."""
        return cls(number=number, title=title, status=Status.PROPOSED, date=dt.date.today())

    @property
    def date_text(self) -> str:
        """``YYYY-MM-DD`` or ``""`` when the date is unknown."""
        return self.date.strftime(DATE_FORMAT) if self.date else ""

    def summary(self) -> dict[str, Any]:
        """The list-view shape: number, title, status, date."""
        return {
            "number": self.number,
            "title": self.title,
            "status": str(self.status),
            "date": self.date_text,
        }

    def detail(self) -> dict[str, Any]:
        """:meth:`summary` plus the raw document content."""
        return {**self.summary(), "content": self.content or ""}


def first_non_empty_line(text: str) -> str:
    """First non-blank line of *text*, trimmed."""
    for line in text.split("\n"):
        stripped = line.strip()
        if stripped:
            return stripped
    return ""


def parse_date(text: str) -> dt.date | None:
    """Parse ``YYYY-MM-DD``; anything else yields None."""
    if not DATE_PATTERN.match(text):
        return None
    try:
        return dt.datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return None


def assemble(meta: Metadata, fallback_number: int) -> ADR:
    """Build a typed :class:`ADR` from extracted *meta*.

    *fallback_number* (usually the filename prefix) is used when the
    heading carried no number.  Only the first line of the status text
    names the status; later lines are references.  MADR status values
    may also carry references after a comma.

    Raises:
        AdrError: ``INVALID`` for an unparseable status or a non-positive
            number.
    """
    number = meta.number or fallback_number
    if number < 1:
        raise AdrError(ErrorKind.INVALID, f"invalid ADR number {number}", number=number)

    status_line = first_non_empty_line(meta.status)
    if not status_line:
        status = Status.PROPOSED
    else:
        if meta.dialect == MADR_DIALECT:
            # "proposed, supersedes [ADR-0001](...)"
            status_line = status_line.split(",", 1)[0]
        parsed = parse_status(status_line)
        if parsed is None:
            raise AdrError(ErrorKind.INVALID, f"invalid status {meta.status!r}", number=number)
        status = parsed

    return ADR(number=number, title=meta.title, status=status, date=parse_date(meta.date))
