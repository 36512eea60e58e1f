"""Open-Meteo forecast client for current conditions plus a daily window."""

from typing import Any

from cityweather.config.defaults import DEFAULT_TIMEOUT_MS, FORECAST_URL
from cityweather.ingest.http_fetch import fetch_json

FORECAST_FAILED = "Failed to fetch weather data. Please try again later."
DAILY_FIELDS = ("weathercode", "temperature_2m_max", "temperature_2m_min", "sunrise", "sunset")


class ForecastClient:
    def __init__(self, base_url: str = FORECAST_URL, timeout_ms: int = DEFAULT_TIMEOUT_MS):
        self.base_url = base_url
        self.timeout_ms = timeout_ms

    def get_forecast(
        self, latitude: float, longitude: float, start_date: str, end_date: str
    ) -> dict[str, Any]:
        """Fetch the raw forecast payload; timezone is resolved from the coordinates."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "daily": ",".join(DAILY_FIELDS),
            "timezone": "auto",
            "start_date": start_date,
            "end_date": end_date,
        }
        return fetch_json(self.base_url, FORECAST_FAILED, self.timeout_ms, params=params)
