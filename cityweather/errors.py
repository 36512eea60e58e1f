"""Error taxonomy for weather lookups.

Every failure collapses to a single human-readable message on ``.message``.
"""

TIMEOUT_MESSAGE = "Request timed out. Please try again later."


class WeatherError(Exception):
    """Base class for failures surfaced to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyInputError(WeatherError):
    """City name was blank."""


class NetworkError(WeatherError):
    """Transport-level failure before a response arrived."""


class RequestTimeoutError(NetworkError):
    """Upstream did not answer within the configured timeout."""

    def __init__(self, message: str = TIMEOUT_MESSAGE):
        super().__init__(message)


class UpstreamError(WeatherError):
    """Non-success status or an undecodable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CityNotFoundError(WeatherError):
    """Geocoder returned no match."""


class IncompleteDataError(WeatherError):
    """Forecast response lacks the current or daily block."""
