"""Tests for the models command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from wirecoerce.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestModelsCommand:
    def test_lists_models(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["models"])
        assert result.exit_code == 0
        assert "authorization-request" in result.output
        assert "relation-tuple" in result.output

    def test_list_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "models"])
        data = json.loads(result.stdout)
        assert data["op"] == "list_models"
        assert data["data"]["count"] == len(data["data"]["items"])

    def test_describe(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["models", "authorization-request"])
        assert result.exit_code == 0
        assert "scopes: List[String]" in result.output

    def test_describe_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "models", "subject-set"])
        data = json.loads(result.stdout)
        assert data["data"]["descriptor"]["fields"] == {
            "namespace": {"kind": "String"},
            "object": {"kind": "String"},
            "relation": {"kind": "String"},
        }

    def test_describe_unknown(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["models", "nope"])
        assert result.exit_code == 1
        assert "Unknown model" in result.stderr
