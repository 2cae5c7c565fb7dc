"""Tests for the root wirecoerce CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from wirecoerce import __version__
from wirecoerce.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "wirecoerce" in result.output
    assert "decode" in result.output
    assert "models" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "models"])
    assert result.exit_code == 0


def test_missing_config_file(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "does-not-exist.toml", "models"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_json_output_from_env(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WIRECOERCE_JSON_OUTPUT", "true")
    result = cli_runner.invoke(cli, ["models"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["op"] == "list_models"


def test_json_output_from_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "wirecoerce.toml").write_text("json_output = true\n")
    result = cli_runner.invoke(cli, ["models"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["op"] == "list_models"


def test_verbose_from_config_file(cli_runner: CliRunner, tmp_path: Path) -> None:
    (tmp_path / "wirecoerce.toml").write_text("verbose = true\n")
    result = cli_runner.invoke(cli, ["decode", "authorization-request"], input='{"id": "x"}')
    assert result.exit_code == 0
    assert result.stdout.startswith("OK")
