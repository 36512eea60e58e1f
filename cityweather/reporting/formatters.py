"""Output formatters for weather reports."""

import html
import json
from dataclasses import asdict
from datetime import datetime

from cityweather.models.weather import WeatherReport


def format_clock(timestamp: str) -> str:
    """'2026-10-19T07:45' -> '07:45'. Unparseable values pass through."""
    try:
        return datetime.fromisoformat(timestamp).strftime("%H:%M")
    except (TypeError, ValueError):
        return str(timestamp)


def format_report_text(r: WeatherReport) -> str:
    """Plain text report for the terminal."""
    lines = [
        f"=== Weather in {r.city_name} ===",
        f"Temperature: {r.current.temperature_c}°C",
        f"Conditions: {r.current.description}",
        "",
        f"{len(r.forecast)}-Day Forecast",
    ]
    for d in r.forecast:
        lines.append(
            f"  {d.date}  Max: {d.max_temp_c}°C, Min: {d.min_temp_c}°C  "
            f"Sunrise: {format_clock(d.sunrise)}  Sunset: {format_clock(d.sunset)}  "
            f"{d.description}"
        )
    return "\n".join(lines)


def format_report_json(r: WeatherReport) -> str:
    """JSON report for programmatic consumption."""
    return json.dumps(asdict(r), indent=2, ensure_ascii=False)


def format_report_html(r: WeatherReport) -> str:
    """HTML fragment. Every user- or API-derived string is escaped."""
    e = _escape
    parts = [
        f"<h2>Weather in {e(r.city_name)}</h2>",
        '<div class="current-weather">',
        f'  <i class="wi wi-{e(r.current.icon_id)}" style="font-size: 80px;"></i>',
        f"  <p>Temperature: {e(r.current.temperature_c)}°C</p>",
        f"  <p>Conditions: {e(r.current.description)}</p>",
        "</div>",
        f"<h3>{len(r.forecast)}-Day Forecast</h3>",
        '<div class="forecast-container">',
    ]
    for d in r.forecast:
        parts += [
            '  <div class="forecast-day">',
            f"    <h4>{e(d.date)}</h4>",
            f'    <i class="wi wi-{e(d.icon_id)}" style="font-size: 48px;"></i>',
            f"    <p>Max: {e(d.max_temp_c)}°C, Min: {e(d.min_temp_c)}°C</p>",
            f"    <p>Sunrise: {e(format_clock(d.sunrise))}</p>",
            f"    <p>Sunset: {e(format_clock(d.sunset))}</p>",
            f"    <p>{e(d.description)}</p>",
            "  </div>",
        ]
    parts.append("</div>")
    return "\n".join(parts)


def format_error(message: str) -> str:
    return f"Error: {message}"


def _escape(value: object) -> str:
    return html.escape(str(value), quote=True)
