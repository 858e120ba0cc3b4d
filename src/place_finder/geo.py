"""Geographic primitives — validated coordinates and great-circle distance."""

from __future__ import annotations

import math
from dataclasses import dataclass

EARTH_RADIUS_MILES = 3959.0


class InvalidCoordinateError(ValueError):
    """Raised when a latitude/longitude pair is out of range."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(f"Invalid coordinate: {'; '.join(errors)}")


def haversine_miles(
    lat1: float, lon1: float, lat2: float, lon2: float, *, radius: float = EARTH_RADIUS_MILES,
) -> float:
    """Great-circle distance between two points on Earth in miles.

    Uses the Haversine formula. Inputs are WGS84 decimal degrees. The
    intermediate term is clamped to 1 so antipodal points stay finite. Pass
    ``radius`` in other units (e.g. 6371.0 km) for a different scale.
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    half_dphi = math.radians(lat2 - lat1) / 2
    half_dlambda = math.radians(lon2 - lon1) / 2

    a = math.sin(half_dphi) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(half_dlambda) ** 2
    return 2 * radius * math.asin(min(1.0, math.sqrt(a)))


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        errors = self.validate(self.latitude, self.longitude)
        if errors:
            raise InvalidCoordinateError(errors)

    @staticmethod
    def validate(latitude: float, longitude: float) -> list[str]:
        """Return list of error messages for a lat/lon pair (empty = valid)."""
        errors: list[str] = []

        if not isinstance(latitude, (int, float)) or isinstance(latitude, bool):
            errors.append(f"latitude {latitude!r} is not a number")
        elif not math.isfinite(latitude) or not -90 <= latitude <= 90:
            errors.append(f"latitude {latitude} out of range [-90, 90]")

        if not isinstance(longitude, (int, float)) or isinstance(longitude, bool):
            errors.append(f"longitude {longitude!r} is not a number")
        elif not math.isfinite(longitude) or not -180 <= longitude <= 180:
            errors.append(f"longitude {longitude} out of range [-180, 180]")

        return errors

    def distance_from(self, other: Coordinate) -> float:
        """Distance in miles between this point and ``other``."""
        return haversine_miles(self.latitude, self.longitude, other.latitude, other.longitude)

    def __str__(self) -> str:
        return f"latitude: {self.latitude}, longitude: {self.longitude}"
