"""The fixed set of cities offered by the dashboard."""

from weatherdash.models.weather import CityRef

CITIES: tuple[CityRef, ...] = (
    CityRef(name="New York", latitude=40.7128, longitude=-74.006),
    CityRef(name="London", latitude=51.5074, longitude=-0.1278),
    CityRef(name="Tokyo", latitude=35.6762, longitude=139.6503),
    CityRef(name="Sydney", latitude=-33.8688, longitude=151.2093),
    CityRef(name="Mumbai", latitude=19.076, longitude=72.8777),
)


def find_city(name: str) -> CityRef | None:
    """Look up a city by exact name. Returns None if it is not in CITIES."""
    for city in CITIES:
        if city.name == name:
            return city
    return None
