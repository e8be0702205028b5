"""Zone-rule adapter: pytz for offsets and transitions, babel for names.

Everything that needs knowledge of DST transitions, historical offsets or
zone display names goes through this module. Callers only see aware
``datetime`` values and the typed errors below.
"""

from __future__ import annotations

import logging
from datetime import datetime

import pytz
from babel.dates import get_timezone_name

logger = logging.getLogger(__name__)

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class ZoneError(Exception):
    """Base class for failures the zone adapter reports to callers."""


class InvalidDateTimeError(ZoneError):
    """The wall-clock text is not a valid local date/time in the zone."""

    def __init__(self, reason: str, *, text: str, zone_id: str) -> None:
        super().__init__(reason)
        self.reason = reason
        self.text = text
        self.zone_id = zone_id


class UnknownZoneError(ZoneError):
    """The identifier is not in the timezone database."""

    def __init__(self, zone_id: str) -> None:
        super().__init__(f"unknown timezone {zone_id!r}")
        self.zone_id = zone_id


def get_zone(zone_id: str) -> pytz.BaseTzInfo:
    """Look up a pytz zone by its exact IANA id."""
    if not is_known_zone(zone_id):
        raise UnknownZoneError(zone_id)
    return pytz.timezone(zone_id)


def is_known_zone(zone_id: str) -> bool:
    return zone_id in pytz.all_timezones_set


def available_zones(name_filter: str | None = None, *, common_only: bool = True) -> list[str]:
    """Return sorted zone ids, optionally filtered by case-insensitive substring."""
    zones = pytz.common_timezones if common_only else pytz.all_timezones
    if name_filter:
        needle = name_filter.lower()
        zones = [z for z in zones if needle in z.lower()]
    return sorted(zones)


def parse_local_in_zone(text: str, zone_id: str) -> datetime:
    """Interpret *text* as wall-clock time in *zone_id*.

    The text must be an ISO 8601 date or date-time without an offset.
    A time skipped by a DST transition is rejected. A time repeated by
    one resolves to its first (daylight) occurrence.
    """
    zone = get_zone(zone_id)
    try:
        naive = datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidDateTimeError(f"cannot parse {text!r}", text=text, zone_id=zone_id) from exc

    if naive.tzinfo is not None:
        raise InvalidDateTimeError(
            "date/time must not carry its own UTC offset", text=text, zone_id=zone_id
        )

    try:
        try:
            localized = zone.localize(naive, is_dst=None)
        except pytz.AmbiguousTimeError:
            localized = zone.localize(naive, is_dst=True)
    except pytz.NonExistentTimeError as exc:
        raise InvalidDateTimeError(
            f"{text} does not exist in {zone_id} (skipped by a DST transition)",
            text=text,
            zone_id=zone_id,
        ) from exc
    except OverflowError as exc:
        raise InvalidDateTimeError("date/time out of range", text=text, zone_id=zone_id) from exc

    logger.debug("Parsed %s in %s as %s", text, zone_id, localized.isoformat())
    return localized


def reproject_to_zone(instant: datetime, zone_id: str) -> datetime:
    """Same absolute instant, rendered in *zone_id*."""
    zone = get_zone(zone_id)
    try:
        return instant.astimezone(zone)
    except OverflowError as exc:
        raise InvalidDateTimeError(
            "date/time out of range",
            text=instant.replace(tzinfo=None).isoformat(timespec="minutes"),
            zone_id=zone_id,
        ) from exc


def utc_offset_minutes(instant: datetime) -> int:
    offset = instant.utcoffset()
    if offset is None:
        raise ValueError("instant must be timezone-aware")
    return round(offset.total_seconds() / 60)


def offset_string(instant: datetime) -> str:
    """Signed ``±HH:MM`` UTC offset."""
    minutes = utc_offset_minutes(instant)
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def offset_label(instant: datetime) -> str:
    """Long name of the offset in effect, e.g. ``Eastern Daylight Time``."""
    return get_timezone_name(instant, width="long", locale="en")


def format_long(instant: datetime) -> str:
    """E.g. ``Saturday, June 15, 2024 at 2:30 PM``.

    Names are English regardless of process locale.
    """
    hour12 = instant.hour % 12 or 12
    meridiem = "AM" if instant.hour < 12 else "PM"
    return (
        f"{_WEEKDAYS[instant.weekday()]}, {_MONTHS[instant.month - 1]} "
        f"{instant.day}, {instant.year} at {hour12}:{instant.minute:02d} {meridiem}"
    )
