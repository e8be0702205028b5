"""Conversion request/result models and the error taxonomy.

A ConversionRequest is what the form holds; a ConversionResult is built
fresh per request and discarded after rendering; a DisplayPayload is the
flat, templated view of a result.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

WALL_CLOCK_FORMAT = "%Y-%m-%dT%H:%M"


class ErrorCode(StrEnum):
    """Error codes surfaced in ServiceError.code."""

    MISSING_FIELD = "MISSING_FIELD"
    IDENTICAL_ZONES = "IDENTICAL_ZONES"
    INVALID_DATETIME = "INVALID_DATETIME"
    UNKNOWN_ZONE = "UNKNOWN_ZONE"
    UNEXPECTED_FAILURE = "UNEXPECTED_FAILURE"


class InputField(StrEnum):
    """The three form inputs."""

    WALL_CLOCK = "wall_clock"
    SOURCE_ZONE = "source_zone"
    TARGET_ZONE = "target_zone"


@dataclass(frozen=True)
class ConversionRequest:
    """Raw form values. Any field may be empty until validated."""

    wall_clock: str | None = None
    source_zone: str | None = None
    target_zone: str | None = None

    def missing_fields(self) -> list[InputField]:
        values = {
            InputField.WALL_CLOCK: self.wall_clock,
            InputField.SOURCE_ZONE: self.source_zone,
            InputField.TARGET_ZONE: self.target_zone,
        }
        return [name for name, value in values.items() if not (value or "").strip()]

    def normalized(self) -> ConversionRequest:
        """Return a copy with surrounding whitespace stripped."""
        return ConversionRequest(
            wall_clock=(self.wall_clock or "").strip(),
            source_zone=(self.source_zone or "").strip(),
            target_zone=(self.target_zone or "").strip(),
        )

    def replace(self, field: InputField, value: str | None) -> ConversionRequest:
        values = {
            "wall_clock": self.wall_clock,
            "source_zone": self.source_zone,
            "target_zone": self.target_zone,
        }
        values[field.value] = value
        return ConversionRequest(**values)


@dataclass(frozen=True)
class ConversionResult:
    """One converted instant, seen from both zones.

    ``source_instant`` and ``target_instant`` denote the same absolute
    point in time; only the zone used to render them differs.
    """

    source_zone: str
    target_zone: str
    source_instant: datetime
    target_instant: datetime
    source_offset_label: str
    target_offset_label: str
    source_offset_minutes: int
    target_offset_minutes: int

    @property
    def offset_difference_minutes(self) -> int:
        return self.target_offset_minutes - self.source_offset_minutes


@dataclass(frozen=True)
class DisplayPayload:
    """Templated strings for a successful conversion."""

    source_zone: str
    target_zone: str
    source_time: str
    target_time: str
    source_offset: str
    target_offset: str
    source_offset_label: str
    target_offset_label: str
    difference: str
    difference_minutes: int

    def to_dict(self) -> dict[str, str | int]:
        return {
            "source_zone": self.source_zone,
            "target_zone": self.target_zone,
            "source_time": self.source_time,
            "target_time": self.target_time,
            "source_offset": self.source_offset,
            "target_offset": self.target_offset,
            "source_offset_label": self.source_offset_label,
            "target_offset_label": self.target_offset_label,
            "difference": self.difference,
            "difference_minutes": self.difference_minutes,
        }
