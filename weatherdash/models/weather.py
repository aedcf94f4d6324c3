"""Weather data models: city references and normalized current conditions."""

from dataclasses import dataclass
from enum import StrEnum


class WeatherCondition(StrEnum):
    CLEAR = "Clear"
    PARTLY_CLOUDY = "Partly Cloudy"
    FOGGY = "Foggy"
    RAINY = "Rainy"
    SNOWY = "Snowy"
    SHOWERS = "Showers"
    THUNDERSTORM = "Thunderstorm"
    CLOUDY = "Cloudy"


class ColorToken(StrEnum):
    HOT = "hot"
    COLD = "cold"
    MODERATE = "moderate"


@dataclass(frozen=True)
class CityRef:
    name: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherRecord:
    """Display-ready snapshot of current weather for one city.

    observed_at_local is the client's wall-clock time when the response was
    parsed, not the upstream measurement time.
    """

    city_name: str
    temperature_celsius: int
    condition: WeatherCondition
    wind_speed_kph: float
    observed_at_local: str


@dataclass(frozen=True)
class ConditionIcon:
    name: str
    color: str
