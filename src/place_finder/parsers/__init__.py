"""Parsers for converting raw geocode responses to PlaceResult."""

from place_finder.parsers.geocode_xml import GeocodeXMLParser
from place_finder.parsers.geocode_json import GeocodeJSONParser

PARSER_MAP = {
    "xml": GeocodeXMLParser(),
    "json": GeocodeJSONParser(),
}

__all__ = ["PARSER_MAP", "GeocodeXMLParser", "GeocodeJSONParser"]
