"""Zone catalog and default-input operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tzconv.domain.clock import default_wall_clock
from tzconv.infrastructure import zones
from tzconv.services.result import ServiceResult

if TYPE_CHECKING:
    from tzconv.domain.clock import Clock


def list_zones(name_filter: str | None = None, *, common_only: bool = True) -> ServiceResult:
    """List zone identifiers the converter accepts."""
    found = zones.available_zones(name_filter, common_only=common_only)
    warnings = [f"No timezones match {name_filter!r}"] if name_filter and not found else []
    return ServiceResult(
        ok=True,
        op="zones",
        data={"count": len(found), "zones": found},
        warnings=warnings,
    )


def current_wall_clock(clock: Clock) -> ServiceResult:
    """The value the date/time input is pre-filled with."""
    return ServiceResult(ok=True, op="now", data={"wall_clock": default_wall_clock(clock)})
