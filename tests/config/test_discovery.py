"""Tests for tzconv.toml discovery."""

from pathlib import Path

import pytest

from tzconv.config.discovery import find_config, resolve_config


def test_not_found(tmp_path: Path) -> None:
    assert find_config(tmp_path) is None


def test_found_in_parent(tmp_path: Path) -> None:
    (tmp_path / "tzconv.toml").write_text("")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config(nested) == (tmp_path / "tzconv.toml").resolve()


def test_env_var_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "tzconv.toml").write_text("")
    monkeypatch.setenv("TZCONV_CONFIG", str(tmp_path / "missing.toml"))
    assert find_config(tmp_path) is None


def test_explicit_path_wins(tmp_path: Path) -> None:
    (tmp_path / "tzconv.toml").write_text("")
    other = tmp_path / "other.toml"
    other.write_text("")
    assert resolve_config(str(other), tmp_path) == other


def test_missing_explicit_file_means_no_config(tmp_path: Path) -> None:
    (tmp_path / "tzconv.toml").write_text("")
    assert resolve_config(str(tmp_path / "gone.toml"), tmp_path) is None


def test_no_explicit_path_falls_back_to_discovery(tmp_path: Path) -> None:
    (tmp_path / "tzconv.toml").write_text("")
    assert resolve_config(None, tmp_path) == (tmp_path / "tzconv.toml").resolve()
