"""Formatting helpers."""

from __future__ import annotations

import re

_DIGITS = re.compile(r"(\d+)")


def format_number(
    value: float | int | None,
    precision: int = 0,
    thousands_separator: str = ",",
) -> str:
    """Return ``value`` with grouped thousands and ``precision`` decimals."""

    if value is None:
        return "N/A"
    formatted = f"{value:,.{precision}f}"
    if thousands_separator != ",":
        formatted = formatted.replace(",", thousands_separator)
    return formatted


def fixed_point(value: float | int, precision: int = 0) -> str:
    """Return ``value`` with ``precision`` decimals and no grouping."""
    return f"{value:.{precision}f}"


def natural_sort_key(value: str) -> list[object]:
    """Sort key ordering embedded numbers by value: ``file2`` before ``file10``."""

    return [int(part) if part.isdigit() else part for part in _DIGITS.split(value)]
