"""Open-Meteo forecast API client (async, no authentication)."""

import logging

import httpx

logger = logging.getLogger(__name__)

OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1"


class WeatherLookupError(Exception):
    """Base class for weather lookup failures."""


class FetchFailure(WeatherLookupError):
    """Raised when the request cannot complete or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(WeatherLookupError):
    """Raised when the response body is not the expected JSON structure."""


class OpenMeteoClient:
    """Thin async wrapper around the Open-Meteo /forecast endpoint.

    One call is one GET; nothing is retried or cached here. Pass an existing
    httpx.AsyncClient to share a connection pool, otherwise a short-lived
    client is opened per call.
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_BASE_URL,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def get_current_weather(self, latitude: float, longitude: float) -> dict:
        """Fetch the current_weather block (and whatever else the API returns)."""
        url = f"{self.base_url}/forecast"
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "temperature_unit": "celsius",
        }
        try:
            if self._client is not None:
                resp = await self._client.get(url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.get(url, params=params)
        except httpx.RequestError as e:
            raise FetchFailure(f"Open-Meteo request failed: {e}") from e

        if not resp.is_success:
            raise FetchFailure(
                f"Open-Meteo returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as e:
            raise MalformedResponse("Open-Meteo response is not valid JSON") from e
        if not isinstance(data, dict):
            raise MalformedResponse(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        return data
