"""structlog setup shared by the CLI and ``adrctl serve``.

Everything goes to stderr so stdout carries only command output:
- human mode renders console lines, colored on a terminal
- ``--log-json`` renders one JSON object per line

stdlib loggers (adrctl's own modules and uvicorn) run through the same
``ProcessorFormatter`` chain as structlog loggers.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from adrctl.domain.errors import AdrError

# uvicorn is run with log_config=None, so its loggers need a route to ours.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def expand_adr_error(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Flatten an ``error=AdrError`` field into message, kind, path and number."""
    exc = event_dict.get("error")
    if isinstance(exc, AdrError):
        event_dict["error"] = exc.message
        event_dict["error_kind"] = str(exc.kind)
        event_dict.update(exc.detail())
    return event_dict


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set logger levels.

    Safe to call more than once; the root handler is replaced each time.

    Args:
        verbose: adrctl loggers and HTTP access lines at DEBUG/INFO; otherwise
            only warnings and errors.
        log_json: JSON lines instead of console lines.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        expand_adr_error,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("adrctl").setLevel(logging.DEBUG if verbose else logging.WARNING)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if verbose else logging.WARNING)
