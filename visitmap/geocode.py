"""
Geocoding
---------
Resolves free-text addresses to coordinates through the Google Geocoding API.

Every failure (network, HTTP status, undecodable or unexpected body, no
results) is logged and answered with the ``(0.0, 0.0, address)`` sentinel, so
callers never have to handle an exception from this module.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Tuple

import requests

from .constants import API_KEY_ENV_VAR, GEOCODE_URL

logger = logging.getLogger(__name__)

GeocodeResult = Tuple[float, float, str]


class GeocodeResolver:
    def __init__(
        self,
        api_key: Optional[str] = None,
        endpoint: str = GEOCODE_URL,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout
        self.requests_made = 0
        self._cache: Dict[str, GeocodeResult] = {}

    def resolve(self, address: str) -> GeocodeResult:
        if address in self._cache:
            return self._cache[address]

        params = {"address": address}
        if self.api_key:
            params["key"] = self.api_key

        self.requests_made += 1
        try:
            response = self.session.get(self.endpoint, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Network error while geocoding '{address}': {e}")
            return 0.0, 0.0, address

        if not 200 <= response.status_code < 300:
            logger.warning(f"Geocoding HTTP error ({response.status_code}) for '{address}'")
            return 0.0, 0.0, address

        try:
            payload = response.json()
        except ValueError as e:
            # requests' JSONDecodeError is both a ValueError and a RequestException.
            logger.warning(f"Geocoding response for '{address}' is not valid JSON: {e}")
            return 0.0, 0.0, address
        except requests.RequestException as e:
            logger.warning(f"Could not read geocoding response for '{address}': {e}")
            return 0.0, 0.0, address

        try:
            results = payload["results"]
            if not results:
                logger.warning(f"No geocoding results for '{address}'")
                return 0.0, 0.0, address
            first = results[0]
            location = first["geometry"]["location"]
            lat = float(location["lat"])
            lng = float(location["lng"])
            formatted = str(first["formatted_address"])
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning(f"Unexpected geocoding response shape for '{address}': {e!r}")
            return 0.0, 0.0, address

        if len(results) > 1:
            logger.debug(f"Ignoring {len(results) - 1} extra geocoding results for '{address}'")
        logger.debug(f"Geocoded '{address}' to ({lat}, {lng}) as '{formatted}'")
        self._cache[address] = (lat, lng, formatted)
        return lat, lng, formatted


def resolver_from_env(env_var: str = API_KEY_ENV_VAR, **kwargs) -> GeocodeResolver:
    api_key = os.environ.get(env_var)
    if not api_key:
        logger.warning(f"{env_var} is not set; geocoding requests will be sent without an API key")
    return GeocodeResolver(api_key=api_key, **kwargs)
