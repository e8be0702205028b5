"""Clock capability used to pre-fill the date/time input."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from tzconv.domain.types import WALL_CLOCK_FORMAT


class Clock(Protocol):
    """Anything that can report the current local wall-clock time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Reads the machine clock in the machine's local zone."""

    def now(self) -> datetime:
        return datetime.now()


def default_wall_clock(clock: Clock) -> str:
    """Current local time truncated to the minute, as ``YYYY-MM-DDTHH:MM``."""
    return clock.now().replace(second=0, microsecond=0).strftime(WALL_CLOCK_FORMAT)
