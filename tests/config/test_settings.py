"""Tests for TzSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from tzconv.config.settings import TzSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TzSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.defaults.source_zone == "America/New_York"
        assert settings.defaults.target_zone == "Europe/London"
        assert settings.display.show_offsets is True
        assert settings.zones.common_only is True

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TzSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tzconv.toml").write_text(
            '[defaults]\nsource_zone = "Asia/Tokyo"\n[display]\nshow_offsets = false\n'
        )
        settings = TzSettings.from_cli(start=tmp_path)
        assert settings.defaults.source_zone == "Asia/Tokyo"
        assert settings.defaults.target_zone == "Europe/London"
        assert settings.display.show_offsets is False
        assert settings.config_path == tmp_path / "tzconv.toml"

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "tzconv.toml").write_text('[defaults]\ntarget_zone = "UTC"\n')
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        settings = TzSettings.from_cli(start=deep)
        assert settings.defaults.target_zone == "UTC"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[zones]\ncommon_only = false\n")
        settings = TzSettings.from_cli(config_path=str(custom))
        assert settings.zones.common_only is False
        assert settings.config_path == custom

    def test_env_var_points_at_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text('[defaults]\nsource_zone = "UTC"\n')
        monkeypatch.setenv("TZCONV_CONFIG", str(custom))
        assert TzSettings.from_cli(start=tmp_path).defaults.source_zone == "UTC"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tzconv.toml").write_text("[defaults\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TzSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "tzconv.toml").write_text("quiet = true\n")
        settings = TzSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "tzconv.toml").write_text('[defaults]\nsource_zone = "Asia/Tokyo"\n')
        monkeypatch.setenv("TZCONV_DEFAULTS__SOURCE_ZONE", "Africa/Cairo")
        settings = TzSettings.from_cli(start=tmp_path)
        assert settings.defaults.source_zone == "Africa/Cairo"
