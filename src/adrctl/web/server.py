"""Starlette application for the ADR HTTP API.

Routes:
- ``GET /health``
- ``GET /api/adr[?q=]``: summaries, sorted, optionally filtered
- ``GET /api/adr/statuses``: status names in canonical order
- ``GET /api/adr/{number}``: summary plus raw content
- ``PATCH /api/adr/{number}/status``: update or supersede
- anything else: the optional frontend directory, with unknown paths
  falling back to ``index.html`` so client-side routes resolve

Errors are ``{"error": "<message>"}`` with the status code mapped from the
:class:`ErrorKind`.  Internal failures never leak their message.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from anyio import to_thread
from starlette.applications import Starlette
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.domain.query import filter_by_query
from adrctl.domain.records import ADR
from adrctl.domain.status import Status, all_status_names, parse_status

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 1024
ASSET_CACHE_CONTROL = "public, immutable, max-age=31536000"

_KIND_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.UNSUPPORTED: 501,
}


class Repository(Protocol):
    def list(self) -> list[ADR]: ...

    def get(self, number: int) -> ADR: ...


class StatusUpdater(Protocol):
    def update_status(self, number: int, status_name: str) -> ADR: ...


class Superseder(Protocol):
    def supersede(self, superseded: int, superseding: int) -> ADR: ...


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _error_response(exc: AdrError, fallback: str) -> JSONResponse:
    """Map *exc* onto an HTTP error; unmapped kinds become a generic 500."""
    status_code = _KIND_STATUS.get(exc.kind)
    if status_code is None:
        logger.error("%s: %s", fallback, exc.message)
        return _error(fallback, 500)
    if exc.kind is ErrorKind.NOT_FOUND:
        return _error("ADR not found", status_code)
    return _error(exc.message, status_code)


def _parse_number(request: Request) -> int | None:
    raw = request.path_params["number"]
    if not (raw.isascii() and raw.isdigit()):
        return None
    number = int(raw)
    return number if number > 0 else None


def _state(request: Request, name: str) -> Any:
    return getattr(request.app.state, name)


# ── Handlers ──────────────────────────────────────────────────────────


async def health(_request: Request) -> Response:
    """GET /health - liveness check."""
    return JSONResponse({"status": "ok"})


async def list_adrs(request: Request) -> Response:
    """GET /api/adr - all ADRs, optionally filtered with ``?q=``."""
    repository: Repository | None = _state(request, "repository")
    if repository is None:
        return _error("repository not configured", 503)

    try:
        records = await to_thread.run_sync(repository.list)
    except AdrError as exc:
        logger.error("Failed to list ADRs: %s", exc.message)
        return _error("failed to list ADRs", 500)

    query = request.query_params.get("q", "")
    return JSONResponse([r.summary() for r in filter_by_query(records, query)])


async def statuses(_request: Request) -> Response:
    """GET /api/adr/statuses - status names in canonical order."""
    return JSONResponse(all_status_names())


async def get_adr(request: Request) -> Response:
    """GET /api/adr/{number} - one ADR with its content."""
    repository: Repository | None = _state(request, "repository")
    if repository is None:
        return _error("repository not configured", 503)

    number = _parse_number(request)
    if number is None:
        return _error("invalid ADR number", 400)

    try:
        record = await to_thread.run_sync(repository.get, number)
    except AdrError as exc:
        return _error_response(exc, "failed to get ADR")
    return JSONResponse(record.detail())


async def _read_body(request: Request) -> dict[str, Any] | None:
    """The JSON object body, or None when missing, oversized or malformed."""
    raw = await request.body()
    if len(raw) > MAX_BODY_BYTES:
        return None
    try:
        body = json.loads(raw)
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


async def update_status(request: Request) -> Response:
    """PATCH /api/adr/{number}/status - set a status, or supersede.

    Body: ``{"status": "<name>", "supersededBy": <int>}``; ``supersededBy``
    is required (and only read) when the status is Superseded.
    """
    if _state(request, "repository") is None:
        return _error("repository not configured", 503)

    number = _parse_number(request)
    if number is None:
        return _error("invalid ADR number", 400)

    if not request.headers.get("content-type", "").startswith("application/json"):
        return _error("Content-Type must be application/json", 400)

    body = await _read_body(request)
    if body is None:
        return _error("invalid request body", 400)

    status_text = body.get("status")
    status = parse_status(status_text) if isinstance(status_text, str) else None
    if status is None:
        return _error("invalid status", 400)

    try:
        if status is Status.SUPERSEDED:
            superseded_by = body.get("supersededBy")
            if superseded_by is None:
                return _error("supersededBy is required when status is Superseded", 400)
            if (
                not isinstance(superseded_by, int)
                or isinstance(superseded_by, bool)
                or superseded_by <= 0
            ):
                return _error("supersededBy must be a positive ADR number", 400)
            superseder: Superseder | None = _state(request, "superseder")
            if superseder is None:
                return _error("supersede not supported", 501)
            record = await to_thread.run_sync(superseder.supersede, number, superseded_by)
        else:
            updater: StatusUpdater | None = _state(request, "updater")
            if updater is None:
                return _error("status updates not supported", 501)
            record = await to_thread.run_sync(updater.update_status, number, status_text)
    except AdrError as exc:
        return _error_response(exc, "failed to update status")

    logger.info("ADR %04d status set to %s", number, record.status)
    return JSONResponse(record.detail())


# ── Frontend ──────────────────────────────────────────────────────────


class FrontendFiles(StaticFiles):
    """Static files for a single-page frontend.

    Hashed bundles under ``assets/`` are cached forever.  Any other path
    that is not a file gets ``index.html`` so the client router can take
    over; unknown ``api/`` paths stay 404.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404 or path.split("/", 1)[0] == "api":
                raise
            return await self._index(scope)
        if path.startswith("assets/"):
            response.headers["Cache-Control"] = ASSET_CACHE_CONTROL
        return response

    async def _index(self, scope: Scope) -> Response:
        try:
            response = await super().get_response("index.html", scope)
        except HTTPException as exc:
            if exc.status_code != 404:
                raise
            return PlainTextResponse("index.html not found", status_code=404)
        response.headers["Cache-Control"] = "no-cache"
        return response


routes = [
    Route("/health", health, methods=["GET"]),
    Route("/api/adr", list_adrs, methods=["GET"]),
    Route("/api/adr/statuses", statuses, methods=["GET"]),
    Route("/api/adr/{number}", get_adr, methods=["GET"]),
    Route("/api/adr/{number}/status", update_status, methods=["PATCH"]),
]


def create_app(
    repository: Repository | None,
    *,
    updater: StatusUpdater | None = None,
    superseder: Superseder | None = None,
    frontend: Path | None = None,
) -> Starlette:
    """Build the Starlette app.

    Args:
        repository: Read access; without it every ADR route answers 503.
        updater: Enables non-Superseded status changes (else 501).
        superseder: Enables the Superseded flow (else 501).
        frontend: Built frontend directory served behind the API routes.
    """
    app_routes: list[Route | Mount] = list(routes)
    if frontend is not None:
        static = FrontendFiles(directory=str(frontend), html=True)
        app_routes.append(Mount("/", app=static, name="frontend"))
        logger.debug("Serving frontend from %s", frontend)
    app = Starlette(routes=app_routes)
    app.state.repository = repository
    app.state.updater = updater
    app.state.superseder = superseder
    return app
