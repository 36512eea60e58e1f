"""Weather report data models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ConditionInfo:
    description: str
    icon_id: str


@dataclass(frozen=True)
class GeocodeResult:
    latitude: float
    longitude: float
    name: str


@dataclass(frozen=True)
class CurrentWeather:
    temperature_c: float
    description: str
    icon_id: str


@dataclass(frozen=True)
class ForecastDay:
    date: str  # YYYY-MM-DD
    max_temp_c: float
    min_temp_c: float
    sunrise: str  # local ISO timestamp, e.g. 2026-10-19T07:45
    sunset: str
    description: str
    icon_id: str


@dataclass(frozen=True)
class WeatherReport:
    city_name: str
    current: CurrentWeather
    forecast: list[ForecastDay] = field(default_factory=list)
    latitude: float | None = None
    longitude: float | None = None
