"""Tests for BaseService error conversion."""

from __future__ import annotations

from pathlib import Path

from adrctl.domain.errors import AdrError, ErrorKind
from adrctl.services.base import BaseService


class TestFailure:
    def test_converts_error(self) -> None:
        exc = AdrError(ErrorKind.NOT_FOUND, "ADR 0003 not found", number=3)
        result = BaseService._failure("show", exc)
        assert result.ok is False
        assert result.op == "show"
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.message == "ADR 0003 not found"
        assert result.error.detail == {"number": 3}

    def test_path_detail(self) -> None:
        exc = AdrError(ErrorKind.IO_FAILURE, "boom", path=Path("/tmp/x.md"))
        result = BaseService._failure("create_adr", exc)
        assert result.error is not None
        assert result.error.detail == {"path": "/tmp/x.md"}
