"""City selection state with last-write-wins fetch results."""

import logging
from collections.abc import Awaitable, Callable

from weatherdash.config.defaults import find_city
from weatherdash.ingest.open_meteo_client import WeatherLookupError
from weatherdash.ingest.weather_lookup import fetch_weather
from weatherdash.models.weather import CityRef, WeatherRecord

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Failed to fetch weather data. Please try again."

FetchFn = Callable[[CityRef], Awaitable[WeatherRecord]]


class UnknownCity(LookupError):
    """Raised internally when a selected name is not one of CITIES."""


class CitySelection:
    """Holds what the dashboard shows for the currently selected city.

    Every select() bumps a generation counter. A refresh only writes its
    outcome if no newer selection happened while it was awaiting the network,
    so a slow earlier response can never overwrite a later one.
    """

    def __init__(self, fetch: FetchFn = fetch_weather):
        self._fetch = fetch
        self.generation = 0
        self.selected_city: str | None = None
        self.record: WeatherRecord | None = None
        self.loading = False
        self.error: str | None = None

    def select(self, city_name: str | None) -> int:
        """Change the selection. Returns the new generation token."""
        self.generation += 1
        self.selected_city = city_name or None
        if self.selected_city is None:
            self.record = None
            self.error = None
            self.loading = False
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation

    async def refresh(self) -> WeatherRecord | None:
        """Fetch weather for the current selection and apply it if still current.

        Lookup failures and unexpected errors both end in FAILURE_MESSAGE.
        Cancellation propagates, but loading is still cleared.
        """
        token = self.generation
        name = self.selected_city
        if name is None:
            return None

        self.loading = True
        self.error = None
        try:
            city = find_city(name)
            if city is None:
                raise UnknownCity(f"City not found: {name}")
            record = await self._fetch(city)
        except (WeatherLookupError, UnknownCity) as e:
            if not self.is_current(token):
                logger.debug("Discarding stale failure for %s: %s", name, e)
                return None
            logger.error("Failed to fetch weather data for %s: %s", name, e)
            self._fail()
            return None
        except Exception:
            if not self.is_current(token):
                logger.debug("Discarding stale failure for %s", name, exc_info=True)
                return None
            logger.exception("Unexpected error fetching weather data for %s", name)
            self._fail()
            return None
        finally:
            if self.is_current(token):
                self.loading = False

        if not self.is_current(token):
            logger.debug(
                "Discarding stale result for %s (generation %d, current %d)",
                name, token, self.generation,
            )
            return None
        self.record = record
        return record

    def _fail(self) -> None:
        self.error = FAILURE_MESSAGE
        self.record = None

    async def choose(self, city_name: str | None) -> WeatherRecord | None:
        self.select(city_name)
        return await self.refresh()
