"""Click-backed UI ports for the converter form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tzconv.domain.types import ConversionRequest, InputField

if TYPE_CHECKING:
    from tzconv.commands._context import AppContext
    from tzconv.services.result import ServiceResult

FIELD_LABELS: dict[InputField, str] = {
    InputField.WALL_CLOCK: "Date/time (YYYY-MM-DDTHH:MM)",
    InputField.SOURCE_ZONE: "From timezone",
    InputField.TARGET_ZONE: "To timezone",
}


class OptionsPort:
    """Inputs come from command-line arguments; the result is emitted once."""

    def __init__(self, app: AppContext, request: ConversionRequest) -> None:
        self._app = app
        self.request = request

    def read_inputs(self) -> ConversionRequest:
        return self.request

    def set_wall_clock(self, value: str) -> None:
        self.request = self.request.replace(InputField.WALL_CLOCK, value)

    def show_result(self, result: ServiceResult) -> None:
        self._app.emit(result)


class PromptPort:
    """Inputs are typed at prompts; results are echoed and the session goes on."""

    def __init__(self, app: AppContext, request: ConversionRequest) -> None:
        self._app = app
        self.request = request

    def read_inputs(self) -> ConversionRequest:
        return self.request

    def set_wall_clock(self, value: str) -> None:
        self.request = self.request.replace(InputField.WALL_CLOCK, value)

    def prompt(self, field: InputField) -> str:
        """Ask for a new value, offering the current one as default."""
        current = getattr(self.request, field.value) or ""
        value = click.prompt(
            FIELD_LABELS[field],
            default=current,
            show_default=bool(current),
        )
        self.request = self.request.replace(field, value.strip())
        return value

    def show_result(self, result: ServiceResult) -> None:
        click.echo(self._app.render(result), err=not result.ok)
