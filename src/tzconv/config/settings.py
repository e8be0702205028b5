"""TzSettings — one frozen object for flags, environment and tzconv.toml.

Precedence, highest first: command-line flags, ``TZCONV_*`` environment
variables (``TZCONV_DEFAULTS__SOURCE_ZONE`` for nested keys), the
tzconv.toml picked by :func:`~tzconv.config.discovery.resolve_config`,
then the defaults in :mod:`tzconv.config.models`.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from tzconv.config.discovery import resolve_config
from tzconv.config.models import DefaultsConfig, DisplayConfig, ZonesConfig

# The TOML file for the settings object currently being built.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class TzSettings(BaseSettings):
    """Settings shared by all commands through the AppContext."""

    model_config = {
        "frozen": True,
        "env_prefix": "TZCONV_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    zones: ZonesConfig = Field(default_factory=ZonesConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = _toml_file.get()
        if toml_file is None:
            return (init_settings, env_settings)
        return (init_settings, env_settings, TomlConfigSettingsSource(settings_cls, toml_file))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **flags: Any,
    ) -> TzSettings:
        """Build settings for one invocation; *flags* are the CLI switches."""
        toml_file = resolve_config(config_path, start)
        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_file}: {exc}") from exc
        finally:
            _toml_file.reset(token)
