"""Error taxonomy shared by every layer.

Domain and infrastructure code raise :class:`AdrError`; services turn it
into a ``ServiceResult`` failure and the HTTP layer maps ``kind`` onto a
status code.  Callers branch on ``kind``, never on the message text.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class ErrorKind(StrEnum):
    """Failure categories."""

    NOT_FOUND = "NOT_FOUND"
    INVALID = "INVALID"
    IO_FAILURE = "IO_FAILURE"
    UNSUPPORTED = "UNSUPPORTED"


class AdrError(Exception):
    """An error carrying its :class:`ErrorKind` and optional context.

    Attributes:
        kind: Failure category.
        message: Human-readable reason.
        path: File involved, if any.
        number: ADR number involved, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        path: Path | None = None,
        number: int | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path
        self.number = number

    def detail(self) -> dict[str, str | int]:
        """Context fields suitable for ``ServiceError.detail``."""
        out: dict[str, str | int] = {}
        if self.path is not None:
            out["path"] = str(self.path)
        if self.number is not None:
            out["number"] = self.number
        return out

    def __repr__(self) -> str:
        return f"AdrError({self.kind!s}, {self.message!r})"
