"""Parser for the XML geocode response (``/geocode/xml``)."""

from __future__ import annotations

import logging
from xml.etree import ElementTree

from place_finder.models import NO_RESULT, Resolution
from place_finder.parsers.base import ResponseParser

logger = logging.getLogger(__name__)

# Document layout:
# <GeocodeResponse>
#   <status>OK</status>
#   <result>
#     <type>...</type>*
#     <formatted_address>...</formatted_address>
#     <address_component><long_name>...</long_name>...</address_component>*
#     <geometry><location><lat>..</lat><lng>..</lng></location></geometry>
#   </result>*
# </GeocodeResponse>
_ROOT_TAG = "GeocodeResponse"


class GeocodeXMLParser(ResponseParser):
    """Parse an XML GeocodeResponse → top PlaceResult."""

    def parse(self, raw_payload: str | bytes) -> Resolution:
        try:
            root = ElementTree.fromstring(raw_payload)
        except (ElementTree.ParseError, TypeError, ValueError) as exc:
            logger.debug("Malformed XML response: %s", exc)
            return NO_RESULT

        if root.tag != _ROOT_TAG:
            logger.debug("Unexpected root element <%s>", root.tag)
            return NO_RESULT

        status = root.findtext("status")
        if status is not None and status.strip() != "OK":
            logger.debug("Service status %s", status.strip())
            return NO_RESULT

        first = root.find("result")
        if first is None:
            logger.debug("Response contains no results")
            return NO_RESULT

        try:
            return self._parse_result(first)
        except (TypeError, ValueError) as exc:
            logger.debug("Unusable first result: %s", exc)
            return NO_RESULT

    def _parse_result(self, result: ElementTree.Element):
        # Name is the first address component's long name, which is often a
        # street number rather than the place's common name.
        component = result.find("address_component")
        name = component.findtext("long_name") if component is not None else None

        return self.build_place(
            name=name,
            address=result.findtext("formatted_address"),
            tags=[node.text or "" for node in result.findall("type")],
            latitude=result.findtext("geometry/location/lat"),
            longitude=result.findtext("geometry/location/lng"),
        )
