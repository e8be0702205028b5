"""The ``tzconv`` entry point.

The root group turns the global output and logging switches into a
:class:`TzSettings`, then hands every subcommand an
:class:`~tzconv.commands._context.AppContext`.
"""

from __future__ import annotations

import click

from tzconv import __version__
from tzconv.commands import register_commands
from tzconv.commands._context import AppContext
from tzconv.config.settings import TzSettings


@click.group(invoke_without_command=True, context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, prog_name="tzconv")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the converted time.")
@click.option("-v", "--verbose", is_flag=True, help="Show ISO instants, error codes and debug logs.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option("-c", "--config", "config_path", default=None, help="Use this tzconv.toml.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """tzconv — convert a local date/time between timezones.

    Start with `tzconv convert --examples` or the interactive `tzconv form`.
    """
    # A clock may be supplied as obj={"clock": ...} by tests and embedders.
    supplied = ctx.obj if isinstance(ctx.obj, dict) else {}
    settings = TzSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings, clock=supplied.get("clock"))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
