"""ConverterForm — wires a UI port to the conversion handler.

The form never touches a concrete UI. A :class:`UIPort` exposes the three
input values and a result area; the form pre-fills the date/time from an
injected :class:`~tzconv.domain.clock.Clock` and runs one full
validate → convert → format → render cycle per trigger.
"""

from __future__ import annotations

import logging
from typing import Protocol

from tzconv.domain.clock import Clock, default_wall_clock
from tzconv.domain.types import ConversionRequest, InputField
from tzconv.services.converter import ConversionHandler
from tzconv.services.result import ServiceResult

logger = logging.getLogger(__name__)


class UIPort(Protocol):
    """Read inputs from, and write outputs to, some user interface."""

    def read_inputs(self) -> ConversionRequest: ...

    def set_wall_clock(self, value: str) -> None: ...

    def show_result(self, result: ServiceResult) -> None: ...


class ConverterForm:
    """One converter form bound to a port.

    Usage::

        form = ConverterForm(port, ConversionHandler(), SystemClock())
        form.initialize()
        form.trigger()
    """

    def __init__(self, port: UIPort, handler: ConversionHandler, clock: Clock) -> None:
        self._port = port
        self._handler = handler
        self._clock = clock

    def initialize(self) -> str:
        """Pre-fill the date/time input with the current local minute."""
        value = default_wall_clock(self._clock)
        self._port.set_wall_clock(value)
        logger.debug("Default date/time set to %s", value)
        return value

    def trigger(self) -> ServiceResult:
        """Convert the port's current inputs and render the outcome."""
        result = self._handler.handle(self._port.read_inputs())
        self._port.show_result(result)
        return result

    def on_change(self, field: InputField) -> ServiceResult:
        """Input-change event: the port already holds the new value."""
        logger.debug("Input changed: %s", field)
        return self.trigger()
