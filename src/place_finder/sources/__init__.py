"""Registry of geocoding service endpoints."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ServiceConfig:
    """Configuration for a single geocoding service endpoint."""

    name: str
    url_prefix: str             # encoded query is appended verbatim
    format: str                 # "xml" or "json"
    timeout_seconds: float = 10.0
    encoding: str = "utf-8"     # used to URL-encode the query
    user_agent: str = "place-finder/0.1"


SERVICES: dict[str, ServiceConfig] = {
    "google-xml": ServiceConfig(
        name="google-xml",
        url_prefix="https://maps.googleapis.com/maps/api/geocode/xml?sensor=false&address=",
        format="xml",
    ),
    "google-json": ServiceConfig(
        name="google-json",
        url_prefix="https://maps.googleapis.com/maps/api/geocode/json?sensor=false&address=",
        format="json",
    ),
}

DEFAULT_SERVICE = os.getenv("PLACE_FINDER_SERVICE", "google-xml")
