"""Command: convert one date/time between two timezones."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzconv.commands._base import TzCommand
from tzconv.domain.types import ConversionRequest

if TYPE_CHECKING:
    from tzconv.commands._context import AppContext


@click.command(
    cls=TzCommand,
    examples="""\
  tzconv convert 2024-06-15T14:30 --from America/New_York --to Europe/London
  tzconv convert --to Asia/Kolkata
  tzconv --json convert 2024-11-03T09:00 --from Europe/Berlin --to America/Chicago
  tzconv -q convert 2024-06-15T14:30 --from UTC --to Australia/Sydney""",
)
@click.argument("wall_clock", required=False, metavar="[DATETIME]")
@click.option("--from", "source_zone", default=None, help="Source timezone (IANA id).")
@click.option("--to", "target_zone", default=None, help="Target timezone (IANA id).")
@click.pass_obj
def convert(
    app: AppContext,
    wall_clock: str | None,
    source_zone: str | None,
    target_zone: str | None,
) -> None:
    """Convert DATETIME, read as local time in --from, to --to.

    DATETIME defaults to the current local minute. Zones default to the
    [defaults] section of tzconv.toml.
    """
    from tzconv.commands._ports import OptionsPort
    from tzconv.services.form import ConverterForm

    defaults = app.settings.defaults
    request = ConversionRequest(
        wall_clock=wall_clock,
        source_zone=defaults.source_zone if source_zone is None else source_zone,
        target_zone=defaults.target_zone if target_zone is None else target_zone,
    )
    port = OptionsPort(app, request)
    form = ConverterForm(port, app.handler, app.clock)
    if wall_clock is None:
        form.initialize()
    form.trigger()
