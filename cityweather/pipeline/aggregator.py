"""Weather aggregator: geocode -> forecast -> enrich -> WeatherReport."""

import logging
from collections.abc import Callable
from datetime import date
from typing import Any

from cityweather.config.defaults import DEFAULT_FORECAST_DAYS
from cityweather.config.schema import AppConfig
from cityweather.errors import EmptyInputError, IncompleteDataError
from cityweather.ingest.forecast_client import DAILY_FIELDS, ForecastClient
from cityweather.ingest.geocoding_client import GeocodingClient
from cityweather.lookup.conditions import describe
from cityweather.models.common import add_days, iso_date, local_today
from cityweather.models.weather import CurrentWeather, ForecastDay, WeatherReport

logger = logging.getLogger(__name__)

CITY_REQUIRED = "City name is required."
CURRENT_MISSING = "Current weather data not available at the moment."
DAILY_MISSING = "Forecast data not available at the moment."


def forecast_window(today: date, days: int = DEFAULT_FORECAST_DAYS) -> tuple[str, str]:
    """Inclusive (start, end) dates covering ``days`` days from today."""
    if days < 1:
        raise ValueError("days must be >= 1")
    return iso_date(today), iso_date(add_days(today, days - 1))


class WeatherAggregator:
    def __init__(
        self,
        geocoder: GeocodingClient,
        forecaster: ForecastClient,
        days: int = DEFAULT_FORECAST_DAYS,
        clock: Callable[[], date] = local_today,
    ):
        self.geocoder = geocoder
        self.forecaster = forecaster
        self.days = days
        self.clock = clock

    @classmethod
    def from_config(cls, config: AppConfig) -> "WeatherAggregator":
        return cls(
            GeocodingClient(config.api.geocoding_url, config.api.timeout_ms),
            ForecastClient(config.api.forecast_url, config.api.timeout_ms),
            days=config.forecast.days,
        )

    def get_weather(self, city: str) -> WeatherReport:
        """Build a report for ``city``; any failure aborts with a WeatherError."""
        city = (city or "").strip()
        if not city:
            raise EmptyInputError(CITY_REQUIRED)

        place = self.geocoder.search(city)
        logger.info(
            "Resolved %r to %s (%.4f, %.4f)",
            city, place.name, place.latitude, place.longitude,
        )

        start, end = forecast_window(self.clock(), self.days)
        raw = self.forecaster.get_forecast(place.latitude, place.longitude, start, end)

        current = _parse_current(raw)
        forecast = _parse_daily(raw)
        logger.info("Forecast for %s: %d days from %s", place.name, len(forecast), start)

        return WeatherReport(
            city_name=place.name,
            current=current,
            forecast=forecast,
            latitude=place.latitude,
            longitude=place.longitude,
        )


def get_weather(city: str, config: AppConfig | None = None) -> WeatherReport:
    return WeatherAggregator.from_config(config or AppConfig()).get_weather(city)


def _parse_current(raw: Any) -> CurrentWeather:
    block = raw.get("current_weather") if isinstance(raw, dict) else None
    if not isinstance(block, dict):
        raise IncompleteDataError(CURRENT_MISSING)

    info = describe(block.get("weathercode"))
    return CurrentWeather(
        temperature_c=_celsius(block.get("temperature"), CURRENT_MISSING),
        description=info.description,
        icon_id=info.icon_id,
    )


def _parse_daily(raw: dict) -> list[ForecastDay]:
    daily = raw.get("daily")
    if not isinstance(daily, dict):
        raise IncompleteDataError(DAILY_MISSING)

    dates = daily.get("time")
    if not isinstance(dates, list):
        raise IncompleteDataError(DAILY_MISSING)
    columns = [daily.get(name) for name in DAILY_FIELDS]
    if any(not isinstance(col, list) or len(col) < len(dates) for col in columns):
        logger.warning("Daily block has missing or short arrays: %s", sorted(daily))
        raise IncompleteDataError(DAILY_MISSING)

    days: list[ForecastDay] = []
    for day, code, t_max, t_min, sunrise, sunset in zip(dates, *columns):
        info = describe(code)
        days.append(
            ForecastDay(
                date=day,
                max_temp_c=_celsius(t_max, DAILY_MISSING),
                min_temp_c=_celsius(t_min, DAILY_MISSING),
                sunrise=sunrise,
                sunset=sunset,
                description=info.description,
                icon_id=info.icon_id,
            )
        )
    return days


def _celsius(value: Any, message: str) -> float:
    """Numeric temperature or IncompleteDataError; null and junk are both gaps."""
    if isinstance(value, bool):
        raise IncompleteDataError(message)
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        logger.warning("Non-numeric temperature in forecast: %r", value)
        raise IncompleteDataError(message) from e
