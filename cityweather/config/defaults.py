"""Default Open-Meteo endpoints and request limits."""

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT_MS = 5000
DEFAULT_FORECAST_DAYS = 5
