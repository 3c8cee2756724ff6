"""Result models returned by the conversion and date helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Distance:
    """Great-circle distance expressed in several units."""

    meters: float
    kilometers: float
    miles: float

    def as_dict(self) -> dict[str, float]:
        return {
            "meters": self.meters,
            "kilometers": self.kilometers,
            "miles": self.miles,
        }


@dataclass(frozen=True, slots=True)
class TimezoneInfo:
    """Current offset and location details for a timezone."""

    offset: float
    country: str
    latitude: float | str
    longitude: float | str
    dst: bool

    def as_dict(self) -> dict[str, object]:
        return {
            "offset": self.offset,
            "country": self.country,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "dst": self.dst,
        }
