"""Tests for the zones and now commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from tzconv.cli import cli


class TestZonesCommand:
    def test_filter(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "--filter", "tokyo"])
        assert result.exit_code == 0
        assert "Asia/Tokyo" in result.output
        assert "1 zones" in result.output

    def test_quiet_lists_ids(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zones", "--filter", "new_york"])
        assert result.exit_code == 0
        assert result.output.strip() == "America/New_York"

    def test_all_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "zones", "--all", "--filter", "calcutta"])
        assert result.output.strip() == "Asia/Calcutta"

    def test_common_only_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "tzconv.toml").write_text("[zones]\ncommon_only = false\n")
        result = cli_runner.invoke(cli, ["--json", "zones", "--filter", "calcutta"])
        assert json.loads(result.output)["data"]["zones"] == ["Asia/Calcutta"]

    def test_no_match_warns(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zones", "--filter", "atlantis"])
        assert result.exit_code == 0
        assert "WARNING: No timezones match 'atlantis'" in result.output


class TestNowCommand:
    def test_prints_default_value(self, cli_runner: CliRunner, fixed_clock) -> None:
        result = cli_runner.invoke(cli, ["now"], obj={"clock": fixed_clock})
        assert result.exit_code == 0
        assert result.output.strip() == "2024-06-15T14:30"
