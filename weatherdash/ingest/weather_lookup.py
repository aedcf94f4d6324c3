"""Weather lookup: fetch current conditions for a city and normalize them."""

import logging
import math

from weatherdash.ingest.open_meteo_client import (
    MalformedResponse,
    OpenMeteoClient,
    WeatherLookupError,
)
from weatherdash.models.common import local_time_string, round_half_up
from weatherdash.models.weather import CityRef, WeatherRecord
from weatherdash.presentation.mapping import condition_label

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("temperature", "weathercode", "windspeed")


async def fetch_weather(
    city: CityRef, client: OpenMeteoClient | None = None
) -> WeatherRecord:
    """Fetch and normalize current weather for a city.

    Raises FetchFailure or MalformedResponse; both are logged, then re-raised
    unchanged. No retry is attempted.
    """
    if client is None:
        client = OpenMeteoClient()
    try:
        raw = await client.get_current_weather(city.latitude, city.longitude)
        return _extract_weather_record(raw, city)
    except WeatherLookupError:
        logger.exception("Failed to fetch weather data for %s", city.name)
        raise


def _extract_weather_record(raw: dict, city: CityRef) -> WeatherRecord:
    """Build a WeatherRecord from an Open-Meteo response body."""
    current = raw.get("current_weather")
    if not isinstance(current, dict):
        raise MalformedResponse("Response has no current_weather block")

    values: dict[str, float] = {}
    for field in REQUIRED_FIELDS:
        value = current.get(field)
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedResponse(f"current_weather.{field} missing or not numeric")
        if not math.isfinite(value):
            raise MalformedResponse(f"current_weather.{field} is not finite")
        values[field] = value

    return WeatherRecord(
        city_name=city.name,
        temperature_celsius=round_half_up(values["temperature"]),
        condition=condition_label(int(values["weathercode"])),
        wind_speed_kph=values["windspeed"],
        observed_at_local=local_time_string(),
    )
