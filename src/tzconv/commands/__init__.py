"""tzconv subcommands, one module per command."""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click

# Each module defines a command function named after the module.
COMMAND_MODULES = ("convert", "form", "zones", "now")


def register_commands(cli: click.Group) -> None:
    for name in COMMAND_MODULES:
        module = importlib.import_module(f"tzconv.commands.{name}")
        cli.add_command(getattr(module, name))
