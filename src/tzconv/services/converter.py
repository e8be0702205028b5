"""ConversionHandler — validate, convert and format one request.

Each stage returns an :class:`Outcome` instead of raising: either a value
or a :class:`ServiceError` carrying one of the :class:`ErrorCode` values.
:meth:`ConversionHandler.handle` runs the whole cycle and returns the
ServiceResult the UI renders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import structlog

from tzconv.domain.types import (
    ConversionRequest,
    ConversionResult,
    DisplayPayload,
    ErrorCode,
)
from tzconv.infrastructure import zones
from tzconv.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

T = TypeVar("T")

MISSING_FIELD_MESSAGE = "Please fill in all fields before converting."
IDENTICAL_ZONES_MESSAGE = "Please select different timezones for conversion."
UNEXPECTED_FAILURE_MESSAGE = "An error occurred during conversion. Please try again."


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or an error, never both."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None or self.value is None:
            raise ValueError("unwrap() on a failed outcome")
        return self.value


def _fail(code: ErrorCode, message: str, **detail: object) -> Outcome[T]:
    return Outcome(error=ServiceError(code=str(code), message=message, detail=detail))


def format_difference(minutes: int) -> str:
    """Phrase a signed offset difference.

    >>> format_difference(300)
    '5 hours ahead'
    >>> format_difference(-330)
    '5 hours and 30 minutes behind'
    >>> format_difference(0)
    'Same time'
    """
    if minutes == 0:
        return "Same time"

    hours, mins = divmod(abs(minutes), 60)
    if hours > 0:
        phrase = f"{hours} hour{'' if hours == 1 else 's'}"
        if mins > 0:
            phrase += f" and {mins} minute{'' if mins == 1 else 's'}"
    else:
        phrase = f"{mins} minute{'' if mins == 1 else 's'}"

    return f"{phrase} {'ahead' if minutes > 0 else 'behind'}"


class ConversionHandler:
    """Stateless handler behind the form's convert trigger."""

    OP = "convert"

    def validate(self, request: ConversionRequest) -> Outcome[ConversionRequest]:
        """Check presence of all inputs and that the zones differ.

        Runs before any parsing, so an identical-zone request never
        reaches the zone library.
        """
        missing = request.missing_fields()
        if missing:
            return _fail(
                ErrorCode.MISSING_FIELD,
                MISSING_FIELD_MESSAGE,
                missing=[str(name) for name in missing],
            )

        normalized = request.normalized()
        if normalized.source_zone == normalized.target_zone:
            return _fail(
                ErrorCode.IDENTICAL_ZONES,
                IDENTICAL_ZONES_MESSAGE,
                zone=normalized.source_zone,
            )
        return Outcome(value=normalized)

    def convert(self, request: ConversionRequest) -> Outcome[ConversionResult]:
        """Parse the wall-clock value in the source zone and reproject it.

        *request* must already be validated.
        """
        wall_clock = request.wall_clock or ""
        source_zone = request.source_zone or ""
        target_zone = request.target_zone or ""
        try:
            source = zones.parse_local_in_zone(wall_clock, source_zone)
            target = zones.reproject_to_zone(source, target_zone)
            result = ConversionResult(
                source_zone=source_zone,
                target_zone=target_zone,
                source_instant=source,
                target_instant=target,
                source_offset_label=zones.offset_label(source),
                target_offset_label=zones.offset_label(target),
                source_offset_minutes=zones.utc_offset_minutes(source),
                target_offset_minutes=zones.utc_offset_minutes(target),
            )
        except zones.InvalidDateTimeError as exc:
            return _fail(
                ErrorCode.INVALID_DATETIME,
                f"Invalid date/time: {exc.reason}",
                value=exc.text,
                zone=exc.zone_id,
            )
        except zones.UnknownZoneError as exc:
            return _fail(
                ErrorCode.UNKNOWN_ZONE,
                f"Unknown timezone: {exc.zone_id}",
                zone=exc.zone_id,
            )
        except Exception as exc:
            log.exception("conversion.failed", source_zone=source_zone, target_zone=target_zone)
            return _fail(
                ErrorCode.UNEXPECTED_FAILURE,
                UNEXPECTED_FAILURE_MESSAGE,
                exception=type(exc).__name__,
            )
        return Outcome(value=result)

    def format(self, result: ConversionResult) -> DisplayPayload:
        return DisplayPayload(
            source_zone=result.source_zone,
            target_zone=result.target_zone,
            source_time=zones.format_long(result.source_instant),
            target_time=zones.format_long(result.target_instant),
            source_offset=zones.offset_string(result.source_instant),
            target_offset=zones.offset_string(result.target_instant),
            source_offset_label=result.source_offset_label,
            target_offset_label=result.target_offset_label,
            difference=format_difference(result.offset_difference_minutes),
            difference_minutes=result.offset_difference_minutes,
        )

    def handle(self, request: ConversionRequest) -> ServiceResult:
        """Run one validate → convert → format cycle."""
        validated = self.validate(request)
        if validated.error is not None:
            log.info("conversion.rejected", code=validated.error.code)
            return ServiceResult(ok=False, op=self.OP, error=validated.error)

        clean = validated.unwrap()
        log.debug(
            "conversion.start",
            wall_clock=clean.wall_clock,
            source_zone=clean.source_zone,
            target_zone=clean.target_zone,
        )
        converted = self.convert(clean)
        if converted.error is not None:
            log.info("conversion.rejected", code=converted.error.code)
            return ServiceResult(ok=False, op=self.OP, error=converted.error)

        result = converted.unwrap()
        log.debug(
            "conversion.complete",
            source=result.source_instant.isoformat(),
            target=result.target_instant.isoformat(),
            offset_difference_minutes=result.offset_difference_minutes,
        )
        data = {
            **self.format(result).to_dict(),
            "source_iso": result.source_instant.isoformat(),
            "target_iso": result.target_instant.isoformat(),
        }
        return ServiceResult(ok=True, op=self.OP, data=data)
