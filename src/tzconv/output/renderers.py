"""Human-readable and ``--quiet`` renderings of a ServiceResult.

Human output is drawn with rich, mirroring the converter form: the two
zoned times side by side, then the offset names and the difference.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.columns import Columns
from rich.text import Text

from tzconv.output.console import buffered_console, drawn_text, style_for_difference

if TYPE_CHECKING:
    from rich.console import Console

    from tzconv.services.result import ServiceResult


def render_result(
    result: ServiceResult, *, verbose: bool = False, show_offsets: bool = True
) -> str:
    """Draw *result* for a person; *verbose* adds ISO instants and error codes."""
    console = buffered_console()
    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose, show_offsets=show_offsets)
    else:
        _render_error(result, console, verbose=verbose)
    return drawn_text(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One value per line, for shell pipelines."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "convert":
        return str(result.data.get("target_time", ""))
    if result.op == "zones":
        return "\n".join(result.data.get("zones", []))
    if result.op == "now":
        return str(result.data.get("wall_clock", ""))
    return f"OK: {result.op}"


def _labelled(console: Console, label: str, value: Any, style: str = "") -> None:
    console.print(Text.assemble((f"  {label}: ", "tz.key"), (str(value), style)))


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    console.print(
        Text.assemble(
            ("ERROR", "tz.error"),
            (f"  {result.op}", "tz.op"),
            " — ",
            err.message if err else "Unknown error",
        )
    )
    if verbose and err:
        _labelled(console, "code", err.code)
        for key, value in err.detail.items():
            _labelled(console, key, value)


def _time_block(zone: str, offset: str, when: str) -> Text:
    block = Text()
    block.append(zone, style="tz.zone")
    block.append(f" ({offset})", style="tz.offset")
    block.append("\n")
    block.append(when, style="tz.time")
    return block


def _render_convert(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_offsets: bool = True
) -> None:
    d = result.data
    console.print(Text.assemble(("OK", "tz.ok"), ("  convert", "tz.op")))
    console.print()
    console.print(
        Columns(
            [
                _time_block(d["source_zone"], d["source_offset"], d["source_time"]),
                Text("→", style="tz.op"),
                _time_block(d["target_zone"], d["target_offset"], d["target_time"]),
            ],
            padding=(0, 3),
        )
    )
    console.print()

    if show_offsets:
        labels = f"{d['source_offset_label']} → {d['target_offset_label']}"
        _labelled(console, "Timezone Offset", labels)
    minutes = int(d.get("difference_minutes", 0))
    _labelled(console, "Time Difference", d["difference"], style_for_difference(minutes))

    if verbose:
        _labelled(console, "source_iso", d.get("source_iso", ""))
        _labelled(console, "target_iso", d.get("target_iso", ""))


def _render_zones(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_offsets: bool = True
) -> None:
    zones = result.data.get("zones", [])
    for zone in zones:
        console.print(Text(zone, style="tz.zone"))
    console.print(f"\n{result.data.get('count', len(zones))} zones")


def _render_now(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_offsets: bool = True
) -> None:
    console.print(Text(str(result.data.get("wall_clock", ""))))


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "convert": _render_convert,
    "zones": _render_zones,
    "now": _render_now,
}
