"""Click command class shared by every tzconv command.

Each command carries a block of sample invocations that ``--examples``
prints, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class TzCommand(click.Command):
    """A click command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str = "", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show sample invocations and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"{ctx.command_path} examples:\n\n{self.examples}")
            ctx.exit(0)
