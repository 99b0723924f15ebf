"""Timing for service calls — @traced.

Near-zero overhead when disabled (single ContextVar.get per call).
When enabled via --verbose, each traced call is timed, logged through
structlog, and its duration is merged into ``ServiceResult.meta``.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from contextvars import ContextVar
from typing import ParamSpec, TypeVar

import structlog

from adrctl.services.result import ServiceResult

_verbose_enabled: ContextVar[bool] = ContextVar("_verbose_enabled", default=False)

_P = ParamSpec("_P")
_R = TypeVar("_R")


def _inject_meta(result: ServiceResult, name: str, duration_ms: float) -> ServiceResult:
    """New result with timing merged into meta (ServiceResult is frozen)."""
    telemetry = {"telemetry": {"name": name, "duration_ms": duration_ms}}
    return result.model_copy(update={"meta": {**(result.meta or {}), **telemetry}})


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Decorator: time a service method and record it in ServiceResult.meta."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _verbose_enabled.get():
            return func(*args, **kwargs)

        log = structlog.get_logger("adrctl.telemetry")
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception:
            elapsed = round((time.perf_counter() - start) * 1000, 2)
            log.debug("span.complete", span_name=func.__qualname__, duration_ms=elapsed, ok=False)
            raise

        elapsed = round((time.perf_counter() - start) * 1000, 2)
        ok = True
        if isinstance(result, ServiceResult):
            ok = result.ok
            result = _inject_meta(result, func.__qualname__, elapsed)  # type: ignore[assignment]
        log.debug("span.complete", span_name=func.__qualname__, duration_ms=elapsed, ok=ok)
        return result

    return wrapper


def enable_telemetry() -> None:
    """Enable verbose timing (called by AppContext at startup)."""
    _verbose_enabled.set(True)


def disable_telemetry() -> None:
    """Disable verbose timing."""
    _verbose_enabled.set(False)
