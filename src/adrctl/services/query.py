"""QueryService — read-only listing, counting and retrieval.

Three surfaces, each a fresh scan of the ADR directory:
- list_adrs: sorted summaries, optionally filtered by a search query
- count_by_status: per-status totals in canonical status order
- get: one ADR with its raw content
"""

from __future__ import annotations

from adrctl.domain.errors import AdrError
from adrctl.domain.query import count_by_status, filter_by_query
from adrctl.services._helpers import display_path
from adrctl.services.base import BaseService
from adrctl.services.result import ServiceResult
from adrctl.services.telemetry import traced


class QueryService(BaseService):
    """Handles ``adrctl list`` and ``adrctl show``."""

    @traced
    def list_adrs(self, *, query: str = "") -> ServiceResult:
        """All ADRs sorted by number; *query* matches title or number."""
        op = "list_adrs"
        try:
            records = self._workspace.repository.list()
        except AdrError as exc:
            return self._failure(op, exc)

        matched = filter_by_query(records, query)
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": [r.summary() for r in matched], "count": len(matched)},
            meta={"query": query} if query.strip() else None,
        )

    @traced
    def count_by_status(self, *, query: str = "") -> ServiceResult:
        """Number of ADRs per status; every status is present."""
        op = "count_by_status"
        try:
            records = self._workspace.repository.list()
        except AdrError as exc:
            return self._failure(op, exc)

        counts = count_by_status(filter_by_query(records, query))
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "by_status": {str(status): n for status, n in counts.items()},
                "total": sum(counts.values()),
            },
        )

    @traced
    def get(self, number: int) -> ServiceResult:
        """ADR *number* with its file path and raw content."""
        op = "show"
        try:
            repository = self._workspace.repository
            record = repository.get(number)
            path = repository.find_file(number)
        except AdrError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={**record.detail(), "file": display_path(path, self._workspace.root)},
        )
