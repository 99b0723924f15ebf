"""Tests for the @traced timing decorator."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from adrctl.services.result import ServiceResult
from adrctl.services.telemetry import disable_telemetry, enable_telemetry, traced


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """Ensure clean telemetry state for every test."""
    yield
    disable_telemetry()


@traced
def _succeed() -> ServiceResult:
    return ServiceResult(ok=True, op="sample", meta={"query": "x"})


@traced
def _plain() -> int:
    return 7


@traced
def _explode() -> ServiceResult:
    raise RuntimeError("boom")


class TestTraced:
    def test_disabled_passthrough(self) -> None:
        assert _succeed().meta == {"query": "x"}

    def test_enabled_injects_timing(self) -> None:
        enable_telemetry()
        meta = _succeed().meta
        assert meta is not None
        assert meta["query"] == "x"
        assert meta["telemetry"]["name"] == "_succeed"
        assert meta["telemetry"]["duration_ms"] >= 0

    def test_non_result_return(self) -> None:
        enable_telemetry()
        assert _plain() == 7

    def test_exception_propagates(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError, match="boom"):
            _explode()

    def test_preserves_metadata(self) -> None:
        assert _succeed.__name__ == "_succeed"
