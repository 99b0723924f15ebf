"""Shared pytest fixtures and test helpers for adrctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from adrctl.config.settings import AdrSettings
from adrctl.infrastructure.filesystem import FileRepository
from adrctl.infrastructure.workspace import Workspace

NYGARD_TEMPLATE = """\
# Title

Date:

## Status

What is the status?

## Context

What is the issue?
"""

MADR_TEMPLATE = """\
---
status: "{proposed | accepted}"
date: {YYYY-MM-DD}
---

# {short title}

## Context and Problem Statement
"""


def nygard_adr(
    number: int, title: str, status: str = "Accepted", date: str = "2024-01-15"
) -> str:
    """A small Nygard-format ADR document."""
    return (
        f"# {number}. {title}\n\nDate: {date}\n\n## Status\n\n{status}\n\n"
        "## Context\n\nSome context.\n"
    )


def madr_adr(title: str, status: str = "accepted", date: str = "2024-02-01") -> str:
    """A small MADR-format ADR document."""
    return f'---\nstatus: "{status}"\ndate: {date}\n---\n\n# {title}\n\n## Context\n\nText.\n'


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep the caller's environment out of settings and discovery."""
    for name in ("ADRCTL_CONFIG", "ADRCTL_VERBOSE", "ADRCTL_JSON_OUTPUT", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers
    from adrctl.services.telemetry import disable_telemetry

    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with ``.adr.json`` and a Nygard template.

    This is the single source of truth for the project layout.  ADRs live
    in ``docs/adr`` next to ``template.md``.
    """
    adr_dir = tmp_path / "docs" / "adr"
    adr_dir.mkdir(parents=True)
    (adr_dir / "template.md").write_text(NYGARD_TEMPLATE, encoding="utf-8")
    config = {"version": "1", "directory": "docs/adr", "template": "nygard"}
    (tmp_path / ".adr.json").write_text(json.dumps(config), encoding="utf-8")
    return tmp_path


@pytest.fixture
def adr_dir(project_root: Path) -> Path:
    return project_root / "docs" / "adr"


@pytest.fixture
def repository(adr_dir: Path) -> FileRepository:
    return FileRepository(adr_dir)


@pytest.fixture
def workspace(project_root: Path) -> Workspace:
    """Workspace over :func:`project_root`."""
    settings = AdrSettings.from_cli(project_root=project_root)
    return Workspace(settings)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_adr(directory: Path, filename: str, content: str) -> Path:
    """Write an ADR file and return its path."""
    path = directory / filename
    path.write_text(content, encoding="utf-8")
    return path
