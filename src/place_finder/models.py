"""Data models for geocoding results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from place_finder.geo import Coordinate


class Absence:
    """The explicit "no usable result" outcome of a lookup.

    Covers zero matches and every failure (network, parse) alike. There is a
    single instance, ``NO_RESULT``; it is falsy so callers can write
    ``if place:``.
    """

    _instance: Absence | None = None

    def __new__(cls) -> Absence:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_RESULT"

    def __reduce__(self):
        return (Absence, ())


NO_RESULT = Absence()


@dataclass(frozen=True)
class PlaceResult:
    """Top match for a query: descriptive metadata plus its coordinate."""

    name: str
    address: str
    coordinate: Coordinate
    tags: tuple[str, ...] = field(default_factory=tuple)

    @property
    def tag(self) -> str:
        """Tags joined for display, in document order ("" when none)."""
        return ", ".join(self.tags)

    @property
    def latitude(self) -> float:
        return self.coordinate.latitude

    @property
    def longitude(self) -> float:
        return self.coordinate.longitude

    def distance_from(self, other: Coordinate | PlaceResult) -> float:
        """Distance in miles to another coordinate or place."""
        if isinstance(other, PlaceResult):
            other = other.coordinate
        return self.coordinate.distance_from(other)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "address": self.address,
            "tags": list(self.tags),
            "latitude": self.coordinate.latitude,
            "longitude": self.coordinate.longitude,
        }

    def __str__(self) -> str:
        return str(self.coordinate)


Resolution = Union[PlaceResult, Absence]
