"""AppContext — what every tzconv command receives via ``@click.pass_obj``.

It bundles the resolved settings, the clock used for the default
date/time, and the conversion handler, and knows how to print a
ServiceResult in the output mode the user chose.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzconv.config.logging import configure_logging
from tzconv.domain.clock import Clock, SystemClock
from tzconv.output.formatters import OutputSettings, format_result
from tzconv.services.converter import ConversionHandler

if TYPE_CHECKING:
    from tzconv.config.settings import TzSettings
    from tzconv.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: TzSettings, *, clock: Clock | None = None) -> None:
        self.settings = settings
        self.clock: Clock = clock or SystemClock()
        self.handler = ConversionHandler()
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
            show_offsets=settings.display.show_offsets,
        )
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def render(self, result: ServiceResult) -> str:
        return format_result(result, settings=self.output)

    def emit(self, result: ServiceResult) -> None:
        """Print *result* once and finish the command.

        Conversions go to stdout so they can be piped; warnings and
        failures go to stderr, and a failure exits with status 1.
        """
        if not result.ok:
            click.echo(self.render(result), err=True)
            raise SystemExit(1)

        click.echo(self.render(result))
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
