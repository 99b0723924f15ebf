"""Shared service-layer helper functions."""

from __future__ import annotations

from pathlib import Path


def display_path(path: Path, root: Path) -> str:
    """*path* relative to *root* when possible, else as given."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
