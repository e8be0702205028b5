"""Off-screen rich console used by the renderers.

Renderers draw into an in-memory console and return the text, so
click decides where it goes (stdout or stderr). Rich emits no ANSI codes
when the process is not attached to a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

TZ_THEME = Theme(
    {
        "tz.ok": "bold green",
        "tz.error": "bold red",
        "tz.op": "bold cyan",
        "tz.key": "dim",
        "tz.zone": "bold blue",
        "tz.time": "bold",
        "tz.offset": "magenta",
        "tz.ahead": "green",
        "tz.behind": "yellow",
    }
)

RENDER_WIDTH = 120


def buffered_console(*, no_color: bool = False, width: int = RENDER_WIDTH) -> Console:
    return Console(
        file=StringIO(),
        theme=TZ_THEME,
        no_color=no_color,
        highlight=False,
        width=width,
    )


def drawn_text(console: Console) -> str:
    """Everything drawn so far on a :func:`buffered_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console is not backed by a StringIO buffer")
    return buffer.getvalue()


def style_for_difference(minutes: int) -> str:
    """Green when the target is ahead, yellow when behind."""
    if minutes > 0:
        return "tz.ahead"
    if minutes < 0:
        return "tz.behind"
    return ""
