"""Resolve free-text place queries and measure great-circle distances."""

from place_finder.clients.geocode_client import GeocodeClient, find, find_place
from place_finder.geo import Coordinate, InvalidCoordinateError, haversine_miles
from place_finder.models import NO_RESULT, Absence, PlaceResult

__all__ = [
    "NO_RESULT",
    "Absence",
    "Coordinate",
    "GeocodeClient",
    "InvalidCoordinateError",
    "PlaceResult",
    "find",
    "find_place",
    "haversine_miles",
]
