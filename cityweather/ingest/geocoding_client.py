"""Open-Meteo geocoding client: city name to coordinates."""

import logging

from cityweather.config.defaults import DEFAULT_TIMEOUT_MS, GEOCODING_URL
from cityweather.errors import CityNotFoundError, UpstreamError
from cityweather.ingest.http_fetch import fetch_json
from cityweather.models.weather import GeocodeResult

logger = logging.getLogger(__name__)

GEOCODE_FAILED = "Failed to fetch geocode data. Please try again later."
CITY_NOT_FOUND = "City not found. Please enter a valid city name."


class GeocodingClient:
    def __init__(self, base_url: str = GEOCODING_URL, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.base_url = base_url
        self.timeout_ms = timeout_ms

    def search(self, name: str) -> GeocodeResult:
        """Resolve a place name to its first geocoding match.

        Several places can share a name; the geocoder's ranking decides and
        only the top hit is used.
        """
        data = fetch_json(
            self.base_url, GEOCODE_FAILED, self.timeout_ms, params={"name": name}
        )
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list) or not results:
            logger.info("No geocoding match for %r", name)
            raise CityNotFoundError(CITY_NOT_FOUND)

        first = results[0]
        try:
            return GeocodeResult(
                latitude=float(first["latitude"]),
                longitude=float(first["longitude"]),
                name=str(first.get("name") or name),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed geocoding result for %r: %s", name, first)
            raise UpstreamError(GEOCODE_FAILED) from e
