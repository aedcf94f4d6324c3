"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weatherdash.config.defaults import find_city
from weatherdash.config.schema import DashboardConfig
from weatherdash.models.weather import CityRef, WeatherCondition, WeatherRecord

TEST_BASE_URL = "https://test-meteo.example.com/v1"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def london() -> CityRef:
    city = find_city("London")
    assert city is not None
    return city


@pytest.fixture
def london_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "open_meteo_london.json") as f:
        return json.load(f)


@pytest.fixture
def london_record() -> WeatherRecord:
    return WeatherRecord(
        city_name="London",
        temperature_celsius=12,
        condition=WeatherCondition.PARTLY_CLOUDY,
        wind_speed_kph=14.2,
        observed_at_local="09:00:00",
    )


@pytest.fixture
def default_config() -> DashboardConfig:
    return DashboardConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML pointing at the test API and return its path."""
    data = {
        "weather_api": {"base_url": TEST_BASE_URL, "timeout_seconds": 2.0},
        "server": {"port": 8123},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
