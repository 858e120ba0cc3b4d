"""Abstract response parser shared by the XML and JSON geocode formats."""

from __future__ import annotations

import abc
from typing import Iterable

from place_finder.geo import Coordinate
from place_finder.models import PlaceResult, Resolution


class ResponseParser(abc.ABC):
    """Abstract parser that converts a raw service response → PlaceResult or NO_RESULT."""

    @abc.abstractmethod
    def parse(self, raw_payload: str | bytes) -> Resolution:
        """Parse a raw geocode response into the top match.

        Only the first result is considered; the service's own ranking is
        trusted. Never raises: an empty, malformed or non-OK response yields
        ``NO_RESULT``.

        Args:
            raw_payload: The raw response body.

        Returns:
            A PlaceResult for the first result, or NO_RESULT.
        """

    @staticmethod
    def build_place(
        name: str | None,
        address: str | None,
        tags: Iterable[str],
        latitude,
        longitude,
    ) -> PlaceResult:
        """Assemble a PlaceResult from extracted fields.

        Raises TypeError/ValueError when the coordinate fields are missing,
        non-numeric or out of range; parsers turn those into NO_RESULT.
        """
        if latitude is None or longitude is None:
            raise ValueError("result has no geometry/location")
        coordinate = Coordinate(_to_degrees(latitude), _to_degrees(longitude))
        return PlaceResult(
            name=(name or "").strip(),
            address=(address or "").strip(),
            coordinate=coordinate,
            tags=tuple(t.strip() for t in tags),
        )


def _to_degrees(value) -> float:
    # XML yields text, JSON yields numbers; anything else (bools included) is malformed.
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"coordinate value {value!r} is not numeric")
    return float(value)
