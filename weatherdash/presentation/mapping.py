"""Map vendor weather codes and temperatures to display vocabulary."""

from weatherdash.models.weather import ColorToken, ConditionIcon, WeatherCondition

# Open-Meteo (WMO) code ranges, inclusive. First match wins.
CONDITION_RANGES: tuple[tuple[int, int, WeatherCondition], ...] = (
    (0, 0, WeatherCondition.CLEAR),
    (1, 3, WeatherCondition.PARTLY_CLOUDY),
    (45, 48, WeatherCondition.FOGGY),
    (51, 67, WeatherCondition.RAINY),
    (71, 77, WeatherCondition.SNOWY),
    (80, 82, WeatherCondition.SHOWERS),
    (95, 99, WeatherCondition.THUNDERSTORM),
)

HOT_THRESHOLD_C = 25
COLD_THRESHOLD_C = 10

COLOR_HEX: dict[ColorToken, str] = {
    ColorToken.HOT: "#ff5722",
    ColorToken.COLD: "#2196f3",
    ColorToken.MODERATE: "#757575",
}

_CLOUD = ConditionIcon(name="cloud", color="#87CEEB")
_GRAIN = ConditionIcon(name="grain", color="#4169E1")

CONDITION_ICONS: dict[WeatherCondition, ConditionIcon] = {
    WeatherCondition.CLEAR: ConditionIcon(name="sunny", color="#FFD700"),
    WeatherCondition.PARTLY_CLOUDY: _CLOUD,
    WeatherCondition.CLOUDY: _CLOUD,
    WeatherCondition.RAINY: _GRAIN,
    WeatherCondition.SHOWERS: _GRAIN,
    WeatherCondition.SNOWY: ConditionIcon(name="snow", color="#E0E0E0"),
    WeatherCondition.THUNDERSTORM: ConditionIcon(name="thunderstorm", color="#483D8B"),
    WeatherCondition.FOGGY: ConditionIcon(name="fog", color="#A9A9A9"),
}


def condition_label(code: int) -> WeatherCondition:
    """Translate a weather code into a condition label. Never fails."""
    for low, high, condition in CONDITION_RANGES:
        if low <= code <= high:
            return condition
    return WeatherCondition.CLOUDY


def temperature_color(celsius: float) -> ColorToken:
    """Classify a temperature: >= 25 hot, <= 10 cold, otherwise moderate."""
    if celsius >= HOT_THRESHOLD_C:
        return ColorToken.HOT
    if celsius <= COLD_THRESHOLD_C:
        return ColorToken.COLD
    return ColorToken.MODERATE


def color_hex(token: ColorToken) -> str:
    return COLOR_HEX[token]


def condition_icon(condition: WeatherCondition | str) -> ConditionIcon:
    """Icon for a condition; unrecognized labels get the cloud icon."""
    try:
        return CONDITION_ICONS[WeatherCondition(condition)]
    except ValueError:
        return _CLOUD
