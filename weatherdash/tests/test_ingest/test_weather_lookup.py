"""Tests for fetch_weather with mocked Open-Meteo client and HTTP."""

import logging
from unittest.mock import MagicMock

import httpx
import pytest
import respx

from weatherdash.ingest.open_meteo_client import (
    FetchFailure,
    MalformedResponse,
    OpenMeteoClient,
)
from weatherdash.ingest.weather_lookup import fetch_weather
from weatherdash.models.weather import CityRef, WeatherCondition

BASE_URL = "https://test-meteo.example.com/v1"


def _mock_client(current: dict | None = None, **body) -> MagicMock:
    client = MagicMock(spec=OpenMeteoClient)
    if current is not None:
        body["current_weather"] = current
    client.get_current_weather.return_value = body
    return client


def _current(temperature=20.0, weathercode=0, windspeed=5.0) -> dict:
    return {
        "temperature": temperature,
        "weathercode": weathercode,
        "windspeed": windspeed,
    }


class TestFetchWeather:
    @pytest.mark.asyncio
    async def test_london_end_to_end(self, london: CityRef, london_response: dict):
        meteo = OpenMeteoClient(base_url=BASE_URL)
        with respx.mock:
            route = respx.get(f"{BASE_URL}/forecast").mock(
                return_value=httpx.Response(200, json=london_response)
            )
            record = await fetch_weather(london, meteo)

        assert route.call_count == 1
        assert record.city_name == "London"
        assert record.temperature_celsius == 12
        assert record.condition == WeatherCondition.PARTLY_CLOUDY
        assert record.condition == "Partly Cloudy"
        assert record.wind_speed_kph == 14.2
        assert record.observed_at_local

    @pytest.mark.asyncio
    async def test_passes_coordinates(self, london: CityRef):
        client = _mock_client(_current())
        await fetch_weather(london, client)
        client.get_current_weather.assert_awaited_once_with(51.5074, -0.1278)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw,expected",
        [(21.4, 21), (21.5, 22), (21.6, 22), (-0.5, 0), (-1.5, -1), (-2.6, -3), (30, 30)],
    )
    async def test_temperature_rounding(self, london: CityRef, raw, expected):
        record = await fetch_weather(london, _mock_client(_current(temperature=raw)))
        assert record.temperature_celsius == expected
        assert isinstance(record.temperature_celsius, int)

    @pytest.mark.asyncio
    async def test_wind_speed_unmodified(self, london: CityRef):
        record = await fetch_weather(london, _mock_client(_current(windspeed=7.35)))
        assert record.wind_speed_kph == 7.35

    @pytest.mark.asyncio
    async def test_unknown_code_is_cloudy(self, london: CityRef):
        record = await fetch_weather(london, _mock_client(_current(weathercode=42)))
        assert record.condition == WeatherCondition.CLOUDY

    @pytest.mark.asyncio
    async def test_observed_at_is_client_time(self, london: CityRef, monkeypatch):
        monkeypatch.setattr(
            "weatherdash.ingest.weather_lookup.local_time_string",
            lambda: "10:11:12",
        )
        record = await fetch_weather(london, _mock_client(_current()))
        # Not the upstream "time" field
        assert record.observed_at_local == "10:11:12"

    @pytest.mark.asyncio
    async def test_http_failure_propagates(self, london: CityRef, caplog):
        meteo = OpenMeteoClient(base_url=BASE_URL)
        with respx.mock:
            respx.get(f"{BASE_URL}/forecast").mock(return_value=httpx.Response(500))
            with caplog.at_level(logging.ERROR), pytest.raises(FetchFailure):
                await fetch_weather(london, meteo)
        assert "London" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_current_weather(self, london: CityRef, caplog):
        client = _mock_client(latitude=51.5)
        with caplog.at_level(logging.ERROR), pytest.raises(
            MalformedResponse, match="current_weather"
        ):
            await fetch_weather(london, client)
        assert "Failed to fetch weather data for London" in caplog.text

    @pytest.mark.asyncio
    async def test_current_weather_not_object(self, london: CityRef):
        client = MagicMock(spec=OpenMeteoClient)
        client.get_current_weather.return_value = {"current_weather": "sunny"}
        with pytest.raises(MalformedResponse):
            await fetch_weather(london, client)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["temperature", "weathercode", "windspeed"])
    async def test_missing_field(self, london: CityRef, field: str):
        current = _current()
        del current[field]
        with pytest.raises(MalformedResponse, match=field):
            await fetch_weather(london, _mock_client(current))

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad", ["12.3", None, True, float("nan")])
    async def test_non_numeric_temperature(self, london: CityRef, bad):
        with pytest.raises(MalformedResponse):
            await fetch_weather(london, _mock_client(_current(temperature=bad)))

    @pytest.mark.asyncio
    async def test_client_error_not_wrapped(self, london: CityRef):
        client = MagicMock(spec=OpenMeteoClient)
        failure = FetchFailure("boom", status_code=502)
        client.get_current_weather.side_effect = failure
        with pytest.raises(FetchFailure) as exc_info:
            await fetch_weather(london, client)
        assert exc_info.value is failure

    @pytest.mark.asyncio
    async def test_default_client_hits_open_meteo(self, london: CityRef, london_response: dict):
        with respx.mock:
            route = respx.get("https://api.open-meteo.com/v1/forecast").mock(
                return_value=httpx.Response(200, json=london_response)
            )
            record = await fetch_weather(london)
        assert route.called
        assert record.temperature_celsius == 12
