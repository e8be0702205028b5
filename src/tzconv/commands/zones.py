"""Command: list timezone identifiers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzconv.commands._base import TzCommand

if TYPE_CHECKING:
    from tzconv.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzconv zones
  tzconv zones --filter europe
  tzconv zones --all --filter gmt
  tzconv -q zones --filter america/""",
)
@click.option("--filter", "name_filter", default=None, help="Case-insensitive substring match.")
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    help="Include deprecated and alias zones (default: common zones only).",
)
@click.pass_obj
def zones(app: AppContext, name_filter: str | None, show_all: bool) -> None:
    """List the timezone identifiers accepted by convert."""
    from tzconv.services.zones import list_zones

    common_only = app.settings.zones.common_only and not show_all
    app.emit(list_zones(name_filter, common_only=common_only))
