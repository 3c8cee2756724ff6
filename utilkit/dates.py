"""Date and timezone helpers backed by the pytz timezone database."""

from __future__ import annotations

import calendar
import logging
import math
import re
import time
from datetime import datetime
from functools import lru_cache

import pytz
from dateutil.relativedelta import relativedelta

from .core.exceptions import InvalidArgumentError
from .core.models import TimezoneInfo

__all__ = [
    "DEFAULT_TIMEZONE",
    "time_difference",
    "timezone_info",
    "validate_timestamp",
    "valid_timezone",
]

LOGGER = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"

_TIMESTAMP = re.compile(r"^\d{8,13}$")
_COORDINATES = re.compile(
    r"^(?P<lat_sign>[+-])(?P<lat_deg>\d{2})(?P<lat_min>\d{2})(?P<lat_sec>\d{2})?"
    r"(?P<lon_sign>[+-])(?P<lon_deg>\d{3})(?P<lon_min>\d{2})(?P<lon_sec>\d{2})?$"
)
_NOT_AVAILABLE = "N/A"

# The Gregorian calendar repeats every 400 years (146 097 days).
_GREGORIAN_CYCLE = 146_097 * 86_400
_GREGORIAN_CYCLE_YEARS = 400
_LATEST_SAFE_TIMESTAMP = calendar.timegm((9000, 1, 1, 0, 0, 0))


def validate_timestamp(timestamp: int) -> bool:
    """Return whether ``timestamp`` looks like a positive 8 to 13 digit unix timestamp."""

    if isinstance(timestamp, bool) or not isinstance(timestamp, int) or timestamp <= 0:
        return False
    return bool(_TIMESTAMP.match(str(timestamp)))


def valid_timezone(timezone: str) -> bool:
    return timezone in pytz.all_timezones_set


def _resolve_timezone(timezone: str) -> str:
    timezone = timezone or DEFAULT_TIMEZONE
    if not valid_timezone(timezone):
        raise InvalidArgumentError(
            f"Timezone {timezone!r} appears to be invalid.",
            details={"timezone": timezone},
        )
    return timezone


def _plural(amount: int, unit: str) -> str:
    return f"{amount} {unit}" if amount == 1 else f"{amount} {unit}s"


def _fold_into_range(timestamp_from: int, timestamp_to: int) -> tuple[int, int, int]:
    """Shift both timestamps by whole 400 year cycles until ``datetime`` can hold them.

    Returns the shifted pair and the number of years removed between them.
    """

    to_cycles = max(0, -(-(timestamp_to - _LATEST_SAFE_TIMESTAMP) // _GREGORIAN_CYCLE))
    folded_to = timestamp_to - to_cycles * _GREGORIAN_CYCLE
    from_cycles = max(0, -(-(timestamp_from - folded_to) // _GREGORIAN_CYCLE))
    folded_from = timestamp_from - from_cycles * _GREGORIAN_CYCLE
    return folded_from, folded_to, _GREGORIAN_CYCLE_YEARS * (to_cycles - from_cycles)


def time_difference(
    timestamp_from: int,
    timestamp_to: int = 0,
    timezone: str = DEFAULT_TIMEZONE,
    append: str = " old",
    extended_output: bool = False,
) -> str:
    """Describe the time elapsed between two unix timestamps.

    Invalid timestamps (zero, negative, or outside 8 to 13 digits) are
    replaced with the current time. Seven days or more are reported in
    weeks, rounded up.

    >>> time_difference(1_700_000_000 - 3_600 * 2, 1_700_000_000)
    '2 hours old'

    With ``extended_output`` every non-zero unit is listed, largest first,
    e.g. ``'1 month 5 days old'``.
    """

    tz = pytz.timezone(_resolve_timezone(timezone))

    now = int(time.time())
    timestamp_to = timestamp_to if validate_timestamp(timestamp_to) else now
    timestamp_from = timestamp_from if validate_timestamp(timestamp_from) else now

    if timestamp_from >= timestamp_to:
        raise InvalidArgumentError(
            "timestamp_from needs to be less than timestamp_to.",
            details={"timestamp_from": timestamp_from, "timestamp_to": timestamp_to},
        )

    folded_from, folded_to, extra_years = _fold_into_range(timestamp_from, timestamp_to)
    start = datetime.fromtimestamp(folded_from, tz)
    end = datetime.fromtimestamp(folded_to, tz)
    delta = relativedelta(end, start)
    years = delta.years + extra_years

    parts: list[str] = []
    if years:
        parts.append(_plural(years, "year"))
    if delta.months:
        parts.append(_plural(delta.months, "month"))
    if delta.days >= 7:
        parts.append(_plural(math.ceil(delta.days / 7), "week"))
    elif delta.days:
        parts.append(_plural(delta.days, "day"))
    if delta.hours:
        parts.append(_plural(delta.hours, "hour"))
    if delta.minutes:
        parts.append(_plural(delta.minutes, "minute"))
    if delta.seconds:
        parts.append(_plural(delta.seconds, "second"))

    text = " ".join(parts) if extended_output else parts[0] if parts else ""
    return text + append


def _parse_coordinate(sign: str, degrees: str, minutes: str, seconds: str | None) -> float:
    value = int(degrees) + int(minutes) / 60 + int(seconds or 0) / 3_600
    return round(-value if sign == "-" else value, 5)


@lru_cache(maxsize=1)
def _zone_locations() -> dict[str, tuple[str, float, float]]:
    """Map zone names to ``(country, latitude, longitude)`` from ``zone.tab``."""

    locations: dict[str, tuple[str, float, float]] = {}
    with pytz.open_resource("zone.tab") as handle:
        for raw_line in handle:
            line = raw_line.decode("utf-8").strip()
            if not line or line.startswith("#"):
                continue
            fields = line.split("\t")
            if len(fields) < 3:
                continue
            match = _COORDINATES.match(fields[1])
            if match is None:
                LOGGER.debug("Skipping zone.tab entry with malformed coordinates: %s", line)
                continue
            latitude = _parse_coordinate(
                match["lat_sign"], match["lat_deg"], match["lat_min"], match["lat_sec"]
            )
            longitude = _parse_coordinate(
                match["lon_sign"], match["lon_deg"], match["lon_min"], match["lon_sec"]
            )
            locations[fields[2]] = (fields[0], latitude, longitude)
    return locations


def timezone_info(timezone: str = DEFAULT_TIMEZONE) -> TimezoneInfo:
    """Return the current offset (hours), DST flag and location of ``timezone``.

    Zones without a geographic location (``UTC``, ``EST``, ``CET`` ...)
    report ``"N/A"`` for country, latitude and longitude.
    """

    name = _resolve_timezone(timezone)
    now = datetime.now(pytz.timezone(name))

    offset = now.utcoffset()
    dst = now.dst()
    country, latitude, longitude = _zone_locations().get(
        name, (_NOT_AVAILABLE, _NOT_AVAILABLE, _NOT_AVAILABLE)
    )

    return TimezoneInfo(
        offset=offset.total_seconds() / 3_600 if offset is not None else 0.0,
        country=country,
        latitude=latitude,
        longitude=longitude,
        dst=bool(dst),
    )
