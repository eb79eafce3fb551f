"""Geocoding and current-temperature lookups via Open-Meteo.

Both calls follow a no-throw contract: any network, HTTP or payload
problem is logged and reported as None.
"""

from __future__ import annotations

from typing import Any, Protocol

import requests

from woodheat.models.heating_models import Coordinate
from woodheat.utils.logger import Logger

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT_S = 10.0

_log = Logger.lazy("enrichment.open_meteo")


class Geocoder(Protocol):
    """Resolves a place name to coordinates."""

    def geocode(self, name: str) -> Coordinate | None: ...


class Forecaster(Protocol):
    """Looks up the current ambient temperature."""

    def current_temperature(self, coordinate: Coordinate) -> float | None: ...


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class OpenMeteoClient:
    """Open-Meteo implementation of ``Geocoder`` and ``Forecaster``.

    Parameters
    ----------
    session : requests.Session | None
        Session to reuse; a new one is created when omitted.
    timeout : float
        Per-request timeout in seconds.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_S,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout

    def _get_json(self, url: str, params: dict[str, Any]) -> Any:
        resp = self._session.get(url, params=params, timeout=self._timeout)
        resp.raise_for_status()
        return resp.json()

    def geocode(self, name: str) -> Coordinate | None:
        """Coordinates of the best match for ``name``, or None."""
        params = {"name": name, "count": 1, "language": "en", "format": "json"}
        try:
            data = self._get_json(GEOCODING_URL, params)
        except (requests.RequestException, ValueError) as e:
            _log.warning("Geocoding failed for %r: %s", name, e)
            return None

        results = data.get("results") if isinstance(data, dict) else None
        if not results or not isinstance(results, list) or not isinstance(results[0], dict):
            _log.info("No geocoding results for %r", name)
            return None
        first = results[0]
        lat, lon = first.get("latitude"), first.get("longitude")
        if not (_is_number(lat) and _is_number(lon)):
            _log.info("Geocoding result for %r has no usable coordinates", name)
            return None
        return Coordinate(lat=float(lat), lon=float(lon))

    def current_temperature(self, coordinate: Coordinate) -> float | None:
        """Current 2 m air temperature in °C at ``coordinate``, or None."""
        params = {
            "latitude": coordinate.lat,
            "longitude": coordinate.lon,
            "current": "temperature_2m",
        }
        try:
            data = self._get_json(FORECAST_URL, params)
        except (requests.RequestException, ValueError) as e:
            _log.warning("Temperature fetch failed for %s: %s", coordinate, e)
            return None

        current = data.get("current") if isinstance(data, dict) else None
        temp = current.get("temperature_2m") if isinstance(current, dict) else None
        if not _is_number(temp):
            _log.info("Forecast for %s has no current temperature", coordinate)
            return None
        return float(temp)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
