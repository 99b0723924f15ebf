"""CreateService — new ADRs from the project template.

Pipeline: LOAD TEMPLATE → ALLOCATE → RENDER → SUPERSEDE → WRITE

Allocation, rendering and superseding are done by
:meth:`FileRepository.create`, which computes every rewrite before the
first write.
"""

from __future__ import annotations

from collections.abc import Iterable

from adrctl.domain.errors import AdrError
from adrctl.services._helpers import display_path
from adrctl.services.base import BaseService
from adrctl.services.result import ServiceResult
from adrctl.services.telemetry import traced


class CreateService(BaseService):
    """Handles ``adrctl new``."""

    @traced
    def create_adr(self, title: str, *, supersedes: Iterable[int] = ()) -> ServiceResult:
        """Create the next numbered ADR titled *title*.

        Args:
            title: Human title; also drives the file name slug.
            supersedes: Numbers of existing ADRs the new one replaces.
                Duplicates are ignored; every ID must be positive.
        """
        op = "create_adr"
        workspace = self._workspace
        try:
            repository = workspace.repository
            template_text = workspace.template_text()
            created = repository.create(title, template_text, supersedes)
        except AdrError as exc:
            return self._failure(op, exc)

        record = created.record
        return ServiceResult(
            ok=True,
            op=op,
            data={
                **record.summary(),
                "path": display_path(created.path, workspace.root),
                "superseded": [display_path(p, workspace.root) for p in created.superseded],
            },
        )
