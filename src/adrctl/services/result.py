"""ServiceResult and ServiceError: what every service hands back.

A result is either a success carrying ``data`` or a failure carrying the
:class:`ServiceError` built from the :class:`AdrError` that stopped the
operation, never both.  ``--json`` prints the model unchanged, so the field
names here are the machine-readable output format.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from adrctl.domain.errors import AdrError, ErrorKind


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` serializes as the bare kind name (``"NOT_FOUND"``);
    ``detail`` holds the file path and ADR number when the error had them.
    """

    model_config = {"frozen": True}

    code: ErrorKind
    message: str
    detail: dict[str, str | int] = Field(default_factory=dict)

    @classmethod
    def from_error(cls, exc: AdrError) -> ServiceError:
        return cls(code=exc.kind, message=exc.message, detail=exc.detail())


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"create_adr"``, ``"list_adrs"``, ...); picks
            the renderer.
        data: Operation-specific payload on success.
        error: Set exactly when ``ok`` is False.
        meta: Query echoes and, with ``--verbose``, telemetry.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_iff_failed(self) -> ServiceResult:
        if self.ok == (self.error is not None):
            msg = "a failed result needs an error and a successful one must not have one"
            raise ValueError(msg)
        return self

    @classmethod
    def failure(cls, op: str, exc: AdrError) -> ServiceResult:
        """A failed result for *op* describing *exc*."""
        return cls(ok=False, op=op, error=ServiceError.from_error(exc))
