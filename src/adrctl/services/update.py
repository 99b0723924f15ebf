"""UpdateService — status changes and supersession.

Both operations rewrite only the status region of the affected files.
Supersession touches two files; the repository writes the superseding
file first.
"""

from __future__ import annotations

from adrctl.domain.errors import AdrError
from adrctl.domain.status import resolve_status_name
from adrctl.services.base import BaseService
from adrctl.services.result import ServiceResult
from adrctl.services.telemetry import traced


class UpdateService(BaseService):
    """Handles ``adrctl update`` and the HTTP status endpoint."""

    @traced
    def update_status(self, number: int, status: str) -> ServiceResult:
        """Set ADR *number* to *status* (case-insensitive, typo-checked)."""
        op = "update_status"
        try:
            name = resolve_status_name(status)
            record = self._workspace.repository.update_status(number, name)
        except AdrError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=record.summary())

    @traced
    def supersede(self, superseded: int, superseding: int) -> ServiceResult:
        """Mark ADR *superseded* as replaced by ADR *superseding*."""
        op = "supersede"
        try:
            record = self._workspace.repository.supersede(superseded, superseding)
        except AdrError as exc:
            return self._failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={**record.summary(), "superseded_by": superseding},
        )
