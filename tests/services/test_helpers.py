"""Tests for service-layer helpers."""

from __future__ import annotations

from pathlib import Path

from adrctl.services._helpers import display_path


class TestDisplayPath:
    def test_relative(self, tmp_path: Path) -> None:
        assert display_path(tmp_path / "docs" / "0001-a.md", tmp_path) == "docs/0001-a.md"

    def test_outside_root(self, tmp_path: Path) -> None:
        other = Path("/elsewhere/0001-a.md")
        assert display_path(other, tmp_path) == "/elsewhere/0001-a.md"
