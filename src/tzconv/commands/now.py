"""Command: print the default date/time input value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzconv.commands._base import TzCommand

if TYPE_CHECKING:
    from tzconv.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzconv now
  tzconv convert "$(tzconv -q now)" --from Asia/Tokyo --to UTC""",
)
@click.pass_obj
def now(app: AppContext) -> None:
    """Print the current local time as YYYY-MM-DDTHH:MM."""
    from tzconv.services.zones import current_wall_clock

    app.emit(current_wall_clock(app.clock))
