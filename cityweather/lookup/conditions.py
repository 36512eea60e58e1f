"""WMO weather condition codes mapped to descriptions and Weather Icons names."""

from types import MappingProxyType

from cityweather.models.weather import ConditionInfo

UNKNOWN_CONDITION = ConditionInfo("Unknown condition", "not-available")

CONDITIONS = MappingProxyType({
    0: ConditionInfo("Clear sky", "day-sunny"),
    1: ConditionInfo("Mainly clear", "day-sunny-overcast"),
    2: ConditionInfo("Partly cloudy", "day-cloudy"),
    3: ConditionInfo("Overcast", "cloudy"),
    45: ConditionInfo("Fog", "fog"),
    48: ConditionInfo("Depositing rime fog", "fog"),
    51: ConditionInfo("Light drizzle", "sprinkle"),
    53: ConditionInfo("Moderate drizzle", "sprinkle"),
    55: ConditionInfo("Dense drizzle", "showers"),
    56: ConditionInfo("Light freezing drizzle", "hail"),
    57: ConditionInfo("Dense freezing drizzle", "hail"),
    61: ConditionInfo("Slight rain", "sprinkle"),
    63: ConditionInfo("Moderate rain", "rain"),
    65: ConditionInfo("Heavy rain", "rain-wind"),
    66: ConditionInfo("Light freezing rain", "rain-mix"),
    67: ConditionInfo("Heavy freezing rain", "rain-mix"),
    71: ConditionInfo("Slight snowfall", "snow"),
    73: ConditionInfo("Moderate snowfall", "snow"),
    75: ConditionInfo("Heavy snowfall", "snow"),
    77: ConditionInfo("Snow grains", "snowflake-cold"),
    80: ConditionInfo("Slight rain showers", "showers"),
    81: ConditionInfo("Moderate rain showers", "showers"),
    82: ConditionInfo("Violent rain showers", "storm-showers"),
    85: ConditionInfo("Slight snow showers", "snow"),
    86: ConditionInfo("Heavy snow showers", "snow"),
    95: ConditionInfo("Thunderstorm", "thunderstorm"),
    96: ConditionInfo("Thunderstorm with slight hail", "thunderstorm"),
    99: ConditionInfo("Thunderstorm with heavy hail", "thunderstorm"),
})


def describe(code: object) -> ConditionInfo:
    """Resolve a condition code, falling back to UNKNOWN_CONDITION.

    The API sends integers, but null or float codes (e.g. 2.0) show up in
    some responses and are tolerated.
    """
    if isinstance(code, bool) or not isinstance(code, (int, float)):
        return UNKNOWN_CONDITION
    if isinstance(code, float):
        if not code.is_integer():
            return UNKNOWN_CONDITION
        code = int(code)
    return CONDITIONS.get(code, UNKNOWN_CONDITION)
