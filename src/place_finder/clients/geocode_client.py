"""Synchronous geocoding client — one blocking request per lookup."""

from __future__ import annotations

import logging
from urllib.parse import quote_plus

import httpx

from place_finder.geo import Coordinate
from place_finder.models import NO_RESULT, Absence, Resolution
from place_finder.parsers import PARSER_MAP
from place_finder.sources import SERVICES, ServiceConfig

logger = logging.getLogger(__name__)


class GeocodeClient:
    """HTTP client resolving free-text queries to the service's top match.

    Every failure mode (unencodable query, unreachable host, timeout, non-2xx
    response, malformed or empty body) yields ``NO_RESULT``; the cause is
    logged, never raised.
    """

    def __init__(self, config: ServiceConfig | None = None, http_client: httpx.Client | None = None):
        self.config = config or SERVICES["google-xml"]
        self._parser = PARSER_MAP[self.config.format]
        self._client = http_client
        self._owns_client = http_client is None

    def _get_client(self) -> httpx.Client:
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=self.config.timeout_seconds,
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_client = True
        return self._client

    def close(self) -> None:
        if self._owns_client and self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> GeocodeClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_url(self, query: str) -> str | None:
        """Request URL for ``query``, or None if it cannot be encoded."""
        try:
            encoded = quote_plus(query, encoding=self.config.encoding)
        except (LookupError, UnicodeError) as exc:
            logger.warning(
                "%s: unable to encode query with %s (%s)",
                self.config.name, self.config.encoding, exc,
            )
            return None
        return self.config.url_prefix + encoded

    def resolve(self, query: str) -> Resolution:
        """Return a PlaceResult for the top match of ``query``, or NO_RESULT."""
        url = self.build_url(query)
        if url is None:
            return NO_RESULT

        body = self._fetch(url)
        if body is None:
            return NO_RESULT

        result = self._parser.parse(body)
        if not result:
            logger.debug("%s: no match for %r", self.config.name, query)
        return result

    def locate(self, query: str) -> Coordinate | Absence:
        """Return only the coordinate of the top match, or NO_RESULT."""
        place = self.resolve(query)
        if not place:
            return NO_RESULT
        return place.coordinate

    def _fetch(self, url: str) -> bytes | None:
        client = self._get_client()
        try:
            resp = client.get(url)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("%s: request failed (%s)", self.config.name, exc)
            return None
        return resp.content


def find_place(query: str, config: ServiceConfig | None = None) -> Resolution:
    """Resolve ``query`` with a short-lived client.

    Sample calls:
        place = find_place("space needle")
        if place:
            print(place.name, place.coordinate)
    """
    with GeocodeClient(config) as client:
        return client.resolve(query)


def find(query: str, config: ServiceConfig | None = None) -> Coordinate | Absence:
    """Coordinate of the top match for ``query``, or NO_RESULT."""
    with GeocodeClient(config) as client:
        return client.locate(query)
