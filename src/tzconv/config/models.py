"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tzconv.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- tzconv.toml sections ---


class DefaultsConfig(BaseModel):
    """[defaults] section — zones used when a command omits them."""

    model_config = {"frozen": True}

    source_zone: str = "America/New_York"
    target_zone: str = "Europe/London"


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    show_offsets: bool = True


class ZonesConfig(BaseModel):
    """[zones] section."""

    model_config = {"frozen": True}

    common_only: bool = True
