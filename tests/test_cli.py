"""Tests for the root tzconv CLI."""

import pytest
from click.testing import CliRunner

from tzconv import __version__
from tzconv.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "tzconv" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flags_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", ["convert", "form", "zones", "now"])
def test_commands_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0


@pytest.mark.parametrize("name", ["convert", "form", "zones", "now"])
def test_examples_flag(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--examples"])
    assert result.exit_code == 0
    assert f"tzconv {name}" in result.output
