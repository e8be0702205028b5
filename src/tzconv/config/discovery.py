"""Locating tzconv.toml.

An explicit path (``--config`` or ``TZCONV_CONFIG``) is used as-is when it
names a file. Otherwise the nearest tzconv.toml in the working directory
or one of its parents applies.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tzconv.toml"
CONFIG_ENV_VAR = "TZCONV_CONFIG"


def _existing(path: str) -> Path | None:
    candidate = Path(path)
    return candidate if candidate.is_file() else None


def find_config(start: Path | None = None) -> Path | None:
    """Return the tzconv.toml that applies from *start* (default: cwd)."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return _existing(override)

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME
    return None


def resolve_config(explicit: str | None = None, start: Path | None = None) -> Path | None:
    """``--config`` wins over discovery; a missing explicit file means no config."""
    if explicit:
        return _existing(explicit)
    return find_config(start)
