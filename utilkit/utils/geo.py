"""Geospatial helpers."""

from __future__ import annotations

from math import atan2, cos, radians, sin, sqrt


EARTH_RADIUS_METERS = 6_371_000


def central_angle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the central angle in radians between two coordinates."""

    phi1 = radians(lat1)
    phi2 = radians(lat2)
    delta_phi = radians(lat2 - lat1)
    delta_lambda = radians(lon2 - lon1)

    # square of half the chord length between the points
    a = sin(delta_phi / 2) ** 2 + cos(phi1) * cos(phi2) * sin(delta_lambda / 2) ** 2
    return 2 * atan2(sqrt(a), sqrt(1 - a))


def haversine_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return the distance between two coordinates in meters."""

    return EARTH_RADIUS_METERS * central_angle(lat1, lon1, lat2, lon2)
