"""Shared test fixtures."""

import json
from datetime import date
from pathlib import Path

import pytest
import yaml

from cityweather.models.weather import CurrentWeather, ForecastDay, WeatherReport

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def geocode_paris() -> dict:
    with open(FIXTURE_DIR / "geocode_paris.json") as f:
        return json.load(f)


@pytest.fixture
def forecast_paris() -> dict:
    with open(FIXTURE_DIR / "forecast_paris.json") as f:
        return json.load(f)


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {
            "geocoding_url": "https://test-geo.example.com/v1/search",
            "forecast_url": "https://test-meteo.example.com/v1/forecast",
            "timeout_ms": 2000,
        },
        "output": {"format": "json"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def sample_report() -> WeatherReport:
    return WeatherReport(
        city_name="Paris",
        current=CurrentWeather(18.4, "Partly cloudy", "day-cloudy"),
        forecast=[
            ForecastDay(
                date="2026-10-19",
                max_temp_c=19.1,
                min_temp_c=10.2,
                sunrise="2026-10-19T08:16",
                sunset="2026-10-19T18:50",
                description="Partly cloudy",
                icon_id="day-cloudy",
            ),
            ForecastDay(
                date="2026-10-20",
                max_temp_c=16.4,
                min_temp_c=11.0,
                sunrise="2026-10-20T08:18",
                sunset="2026-10-20T18:48",
                description="Slight rain",
                icon_id="sprinkle",
            ),
        ],
        latitude=48.8566,
        longitude=2.3522,
    )
