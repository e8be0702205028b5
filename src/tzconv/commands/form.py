"""Command: interactive converter form.

Mirrors a web form: the date/time is pre-filled, every input change
re-runs the conversion, and errors leave the form ready for the next try.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzconv.commands._base import TzCommand
from tzconv.domain.types import ConversionRequest, InputField

if TYPE_CHECKING:
    from tzconv.commands._context import AppContext

_ACTIONS: dict[str, InputField | None] = {
    "d": InputField.WALL_CLOCK,
    "f": InputField.SOURCE_ZONE,
    "t": InputField.TARGET_ZONE,
    "c": None,
    "q": None,
}


@click.command(
    cls=TzCommand,
    examples="""\
  tzconv form
  tzconv form --from Asia/Tokyo --to America/Los_Angeles""",
)
@click.option("--from", "source_zone", default=None, help="Initial source timezone.")
@click.option("--to", "target_zone", default=None, help="Initial target timezone.")
@click.pass_obj
def form(app: AppContext, source_zone: str | None, target_zone: str | None) -> None:
    """Fill in a conversion form interactively.

    Actions after the first conversion: [d]ate/time, [f]rom, [t]o,
    [c]onvert again, [q]uit.
    """
    from tzconv.commands._ports import PromptPort
    from tzconv.services.form import ConverterForm

    defaults = app.settings.defaults
    port = PromptPort(
        app,
        ConversionRequest(
            source_zone=defaults.source_zone if source_zone is None else source_zone,
            target_zone=defaults.target_zone if target_zone is None else target_zone,
        ),
    )
    converter = ConverterForm(port, app.handler, app.clock)
    converter.initialize()
    for field in InputField:
        port.prompt(field)
    converter.trigger()

    while True:
        action = click.prompt(
            "Change [d]ate/time, [f]rom, [t]o, [c]onvert or [q]uit",
            type=click.Choice(list(_ACTIONS)),
            default="q",
            show_choices=False,
        )
        if action == "q":
            break
        field = _ACTIONS[action]
        if field is None:
            converter.trigger()
            continue
        port.prompt(field)
        converter.on_change(field)
