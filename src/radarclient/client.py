from __future__ import annotations

from typing import Any, Dict

from wui.api import Coordinates, Geocoder
from wui.errors import InvalidArgument, UpstreamError
from wui.http import HttpApiClient

from .config import RadarSettings

BASE_URL = "https://api.radar.io/v1"


class RadarClient(HttpApiClient, Geocoder):
    """Geocoder backed by the Radar API (forward and IP geocoding)."""

    provider = 'radar'

    @classmethod
    def from_settings(cls, settings: RadarSettings) -> 'RadarClient':
        return cls(settings.api_key, http=settings.http)

    def _headers(self) -> Dict[str, str]:
        # Radar takes the bare key, no "Bearer" prefix
        return {'Authorization': self.api_key}

    @staticmethod
    def _coordinates(address: Any, where: str) -> Coordinates:
        if not isinstance(address, dict):
            raise UpstreamError(f"{where} was not an object: {address!r}")
        try:
            return Coordinates(
                latitude=float(address['latitude']),
                longitude=float(address['longitude']),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise UpstreamError(
                f"{where} did not have numeric latitude/longitude; got keys {sorted(address)}"
            ) from e

    def geocode(self, query: str) -> Coordinates:
        """Forward-geocode ``query``, returning the top-ranked address."""
        if not query or not query.strip():
            raise InvalidArgument("query cannot be empty")
        data = self._get(
            f"{BASE_URL}/geocode/forward",
            params={'query': query, 'limit': 1},
            headers=self._headers(),
            what='geocode request',
        )
        addresses = data.get('addresses')
        if addresses is not None and not isinstance(addresses, list):
            raise UpstreamError(f"geocode response `addresses` was not a list; got {addresses!r}")
        if not addresses:
            raise UpstreamError(f"geocode response had no addresses for query {query!r}")
        coords = self._coordinates(addresses[0], 'geocode response address')
        self._log.debug("Geocoded %r to %s", query, coords)
        return coords

    def geocode_ip(self) -> Coordinates:
        """Geocode the public IP address the request originates from."""
        data = self._get(f"{BASE_URL}/geocode/ip", headers=self._headers(), what='geocode ip request')
        address = data.get('address')
        if address is None:
            raise UpstreamError(f"geocode ip response did not have an `address` field; got keys {sorted(data)}")
        coords = self._coordinates(address, 'geocode ip response address')
        self._log.debug("Geocoded caller IP %s to %s", data.get('ip'), coords)
        return coords
