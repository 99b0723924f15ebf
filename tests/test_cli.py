"""Tests for the root adrctl CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from adrctl import __version__
from adrctl.cli import cli
from tests.conftest import nygard_adr, write_adr


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "adrctl" in result.output
    for command in ("init", "new", "update", "list", "show", "serve"):
        assert command in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json", "--no-interact", "--plain"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("command", ["init", "new", "update", "list", "show", "serve"])
def test_examples_flag(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert f"adrctl {command}" in result.output


@pytest.mark.parametrize("command", ["init", "new", "update", "list", "show", "serve"])
def test_help_points_at_examples(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"], prog_name="adrctl")
    assert result.exit_code == 0
    assert f"Run 'adrctl {command} --examples' for usage examples." in result.output


def test_config_flag(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    project = tmp_path / "project"
    (project / "records").mkdir(parents=True)
    config = project / "custom.json"
    config.write_text('{"version": "1", "directory": "records"}')
    write_adr(project / "records", "0001-a.md", nygard_adr(1, "A"))
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["--json", "-c", str(config), "list"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["data"]["count"] == 1


def test_config_env_var(
    cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    project = tmp_path / "project"
    project.mkdir()
    config = project / ".adr.json"
    config.write_text('{"version": "1", "directory": "."}')
    write_adr(project, "0001-a.md", nygard_adr(1, "A"))
    monkeypatch.setenv("ADRCTL_CONFIG", str(config))
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(cli, ["-q", "list"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "1"


@pytest.mark.usefixtures("_isolated_project")
def test_verbose_adds_timing(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "-v", "list"])
    data = json.loads(result.stdout)
    assert data["meta"]["telemetry"]["name"] == "QueryService.list_adrs"


@pytest.mark.usefixtures("_isolated_project")
def test_errors_exit_one_with_json(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "show", "7"])
    assert result.exit_code == 1
    data = json.loads(result.stderr)
    assert data["ok"] is False
    assert data["error"]["code"] == "NOT_FOUND"
