"""Unit conversions: temperatures and great-circle distances."""

from __future__ import annotations

from .core.models import Distance
from .utils.geo import haversine_meters

__all__ = [
    "METERS_TO_KILOMETERS",
    "METERS_TO_MILES",
    "haversine_distance",
    "fahrenheit_to_celsius",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "kelvin_to_celsius",
    "fahrenheit_to_kelvin",
    "kelvin_to_fahrenheit",
    "fahrenheit_to_rankine",
    "rankine_to_fahrenheit",
    "celsius_to_rankine",
    "rankine_to_celsius",
    "kelvin_to_rankine",
    "rankine_to_kelvin",
]

METERS_TO_KILOMETERS = 1_000
METERS_TO_MILES = 0.000621371

_KELVIN_OFFSET = 273.15
_RANKINE_OFFSET = 459.67
_FAHRENHEIT_FREEZING = 32
_RANKINE_FREEZING = 491.67
_SCALE = 1.8


def haversine_distance(
    start_latitude: float,
    start_longitude: float,
    end_latitude: float,
    end_longitude: float,
    precision: int = 0,
) -> Distance:
    """Great-circle distance between two points given in degrees.

    Uses the haversine formula on a sphere of radius 6 371 000 m. Every unit
    is rounded to ``precision`` decimals.

    >>> haversine_distance(10.0, 20.0, 10.0, 20.0).as_dict()
    {'meters': 0.0, 'kilometers': 0.0, 'miles': 0.0}
    """

    meters = haversine_meters(start_latitude, start_longitude, end_latitude, end_longitude)
    return Distance(
        meters=round(meters, precision),
        kilometers=round(meters / METERS_TO_KILOMETERS, precision),
        miles=round(meters * METERS_TO_MILES, precision),
    )


def _finish(result: float, rounded: bool, precision: int) -> float:
    return round(result, precision) if rounded else result


def fahrenheit_to_celsius(fahrenheit: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish((fahrenheit - _FAHRENHEIT_FREEZING) / _SCALE, rounded, precision)


def celsius_to_fahrenheit(celsius: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish(celsius * _SCALE + _FAHRENHEIT_FREEZING, rounded, precision)


def celsius_to_kelvin(celsius: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish(celsius + _KELVIN_OFFSET, rounded, precision)


def kelvin_to_celsius(kelvin: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish(kelvin - _KELVIN_OFFSET, rounded, precision)


def fahrenheit_to_kelvin(fahrenheit: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish((fahrenheit - _FAHRENHEIT_FREEZING) / _SCALE + _KELVIN_OFFSET, rounded, precision)


def kelvin_to_fahrenheit(kelvin: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish((kelvin - _KELVIN_OFFSET) * _SCALE + _FAHRENHEIT_FREEZING, rounded, precision)


def fahrenheit_to_rankine(fahrenheit: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish(fahrenheit + _RANKINE_OFFSET, rounded, precision)


def rankine_to_fahrenheit(rankine: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish(rankine - _RANKINE_OFFSET, rounded, precision)


def celsius_to_rankine(celsius: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish(celsius * _SCALE + _RANKINE_FREEZING, rounded, precision)


def rankine_to_celsius(rankine: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish((rankine - _RANKINE_FREEZING) / _SCALE, rounded, precision)


def kelvin_to_rankine(kelvin: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish((kelvin - _KELVIN_OFFSET) * _SCALE + _RANKINE_FREEZING, rounded, precision)


def rankine_to_kelvin(rankine: float, rounded: bool = True, precision: int = 2) -> float:
    return _finish((rankine - _RANKINE_FREEZING) / _SCALE + _KELVIN_OFFSET, rounded, precision)
