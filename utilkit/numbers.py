"""Number helpers."""

from __future__ import annotations

import secrets

from .core.exceptions import InvalidArgumentError
from .utils.formatting import fixed_point, format_number

__all__ = [
    "BINARY_STANDARD_BASE",
    "METRIC_STANDARD_BASE",
    "CONVERSION_MODIFIER",
    "SIZE_FORMAT_UNITS",
    "inside",
    "outside",
    "ordinal",
    "random",
    "size_format",
    "format_number",
]

BINARY_STANDARD_BASE = 1_024
METRIC_STANDARD_BASE = 1_000
CONVERSION_MODIFIER = 0.9

SIZE_FORMAT_UNITS = {
    "binary": ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"),
    "metric": ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"),
}
_BASES = {"binary": BINARY_STANDARD_BASE, "metric": METRIC_STANDARD_BASE}

_SUFFIXES = ("th", "st", "nd", "rd")


def inside(number: float, minimum: float, maximum: float) -> bool:
    """Return whether ``number`` lies within ``[minimum, maximum]``."""
    return minimum <= number <= maximum


def outside(number: float, minimum: float, maximum: float) -> bool:
    return number < minimum or number > maximum


def ordinal(number: int) -> str:
    """Append the English ordinal suffix: ``1st``, ``12th``, ``22nd``."""

    absolute = abs(number)
    if 11 <= absolute % 100 <= 13:
        suffix = _SUFFIXES[0]
    else:
        last = absolute % 10
        suffix = _SUFFIXES[last] if last < len(_SUFFIXES) else _SUFFIXES[0]
    return f"{number}{suffix}"


def random(minimum: int, maximum: int) -> int:
    """Return a cryptographically secure integer in ``[minimum, maximum]``."""

    if minimum > maximum:
        raise InvalidArgumentError(
            "minimum must be less than or equal to maximum",
            details={"minimum": minimum, "maximum": maximum},
        )
    return minimum + secrets.randbelow(maximum - minimum + 1)


def size_format(size: int, precision: int = 0, standard: str = "binary") -> str:
    """Format a byte count for humans.

    >>> size_format(25_151_251, 2)
    '23.99 MiB'
    >>> size_format(2_000, 1, "metric")
    '2.0 kB'
    """

    if standard not in _BASES:
        raise InvalidArgumentError(
            "Invalid standard specified, must be either metric or binary",
            details={"standard": standard},
        )

    base = _BASES[standard]
    units = SIZE_FORMAT_UNITS[standard]

    if size < base:
        return f"{size} {units[0]}"

    value: float = size
    index = 0
    while value / base > CONVERSION_MODIFIER and index < len(units) - 1:
        value /= base
        index += 1

    return f"{fixed_point(value, precision)} {units[index]}"
