"""Output formatters for weather records."""

from weatherdash.models.weather import WeatherRecord
from weatherdash.presentation.mapping import (
    color_hex,
    condition_icon,
    temperature_color,
)


def format_record_text(r: WeatherRecord) -> str:
    """Plain text card for the terminal."""
    token = temperature_color(r.temperature_celsius)
    lines = [
        f"=== {r.city_name} ===",
        f"{r.temperature_celsius}°C ({token})",
        r.condition,
        f"Wind Speed: {r.wind_speed_kph} km/h",
        f"Last updated: {r.observed_at_local}",
    ]
    return "\n".join(lines)


def record_to_dict(r: WeatherRecord) -> dict:
    """JSON-ready payload including derived color and icon."""
    token = temperature_color(r.temperature_celsius)
    icon = condition_icon(r.condition)
    return {
        "city_name": r.city_name,
        "temperature_celsius": r.temperature_celsius,
        "condition": str(r.condition),
        "wind_speed_kph": r.wind_speed_kph,
        "observed_at_local": r.observed_at_local,
        "color_token": str(token),
        "color_hex": color_hex(token),
        "icon": {"name": icon.name, "color": icon.color},
    }
