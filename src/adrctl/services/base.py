"""BaseService — foundation for all adrctl services.

Every service receives a :class:`Workspace` at construction time. The
workspace provides the loaded config and the ADR repository.  Domain and
infrastructure code raise :class:`AdrError`; services catch it at their
boundary and return a failed :class:`ServiceResult` instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from adrctl.services.result import ServiceResult

if TYPE_CHECKING:
    from adrctl.domain.errors import AdrError
    from adrctl.infrastructure.workspace import Workspace

log = structlog.get_logger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class QueryService(BaseService):
            def list_adrs(self) -> ServiceResult:
                try:
                    records = self._workspace.repository.list()
                except AdrError as exc:
                    return self._failure("list_adrs", exc)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace

    @staticmethod
    def _failure(op: str, exc: AdrError) -> ServiceResult:
        """Convert a raised :class:`AdrError` into a failed result."""
        log.debug("service.failed", op=op, error=exc)
        return ServiceResult.failure(op, exc)
