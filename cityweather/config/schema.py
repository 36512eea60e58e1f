"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from cityweather.config.defaults import (
    DEFAULT_FORECAST_DAYS,
    DEFAULT_TIMEOUT_MS,
    FORECAST_URL,
    GEOCODING_URL,
)


class OutputFormat(StrEnum):
    TEXT = "text"
    JSON = "json"
    HTML = "html"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)

    @field_validator("geocoding_url", "forecast_url")
    @classmethod
    def _http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("endpoint must be an absolute http(s) URL")
        return value


class ForecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # Open-Meteo serves at most 16 days ahead
    days: int = Field(default=DEFAULT_FORECAST_DAYS, ge=1, le=16)


class OutputConfig(BaseModel):
    model_config = {"extra": "forbid"}

    format: OutputFormat = OutputFormat.TEXT


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return value


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    forecast: ForecastConfig = ForecastConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
