"""Parser for the JSON geocode response (``/geocode/json``)."""

from __future__ import annotations

import json
import logging

from place_finder.models import NO_RESULT, Resolution
from place_finder.parsers.base import ResponseParser

logger = logging.getLogger(__name__)


class GeocodeJSONParser(ResponseParser):
    """Parse a JSON geocode response → top PlaceResult."""

    def parse(self, raw_payload: str | bytes) -> Resolution:
        try:
            data = json.loads(raw_payload)
        except (TypeError, ValueError) as exc:
            logger.debug("Malformed JSON response: %s", exc)
            return NO_RESULT

        if not isinstance(data, dict):
            logger.debug("Unexpected JSON document type %s", type(data).__name__)
            return NO_RESULT

        status = data.get("status")
        if status is not None and status != "OK":
            logger.debug("Service status %s", status)
            return NO_RESULT

        results = data.get("results") or []
        if not isinstance(results, list) or not results:
            logger.debug("Response contains no results")
            return NO_RESULT

        try:
            return self._parse_result(results[0])
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
            logger.debug("Unusable first result: %s", exc)
            return NO_RESULT

    def _parse_result(self, result: dict):
        location = result["geometry"]["location"]

        components = _as_list(result.get("address_components"), "address_components")
        name = components[0].get("long_name") if components else None

        return self.build_place(
            name=name,
            address=result.get("formatted_address"),
            tags=[str(t) for t in _as_list(result.get("types"), "types")],
            latitude=location.get("lat"),
            longitude=location.get("lng"),
        )


def _as_list(value, field: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{field} is {type(value).__name__}, expected list")
    return value
