"""Weather Dashboard: FastAPI backend serving current weather for a fixed city list."""

import os
from pathlib import Path

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import FileResponse, HTMLResponse

from weatherdash.config.defaults import CITIES, find_city
from weatherdash.config.loader import load_config
from weatherdash.config.schema import DashboardConfig
from weatherdash.ingest.open_meteo_client import OpenMeteoClient, WeatherLookupError
from weatherdash.ingest.weather_lookup import fetch_weather
from weatherdash.models.common import utc_now_iso
from weatherdash.presentation.formatters import record_to_dict
from weatherdash.state.selection import FAILURE_MESSAGE

CONFIG_ENV_VAR = "WEATHERDASH_CONFIG"
DASHBOARD_HTML = Path(__file__).parent.parent / "static" / "dashboard.html"

app = FastAPI(title="Live Weather Dashboard", version="0.1.0")

# Read once at import; `weatherdash serve` replaces it via configure().
config: DashboardConfig = load_config(os.environ.get(CONFIG_ENV_VAR))


def configure(new_config: DashboardConfig) -> None:
    global config
    config = new_config


def get_client() -> OpenMeteoClient:
    return OpenMeteoClient(
        base_url=config.weather_api.base_url,
        timeout=config.weather_api.timeout_seconds,
    )


# ── Data endpoints ──────────────────────────────────────────────


@app.get("/api/cities")
def get_cities():
    """The fixed list of selectable cities."""
    return [
        {"name": c.name, "latitude": c.latitude, "longitude": c.longitude}
        for c in CITIES
    ]


@app.get("/api/weather/{city_name}")
async def get_weather(city_name: str, client: OpenMeteoClient = Depends(get_client)):
    """Current weather for one city, with derived color and icon."""
    city = find_city(city_name)
    if city is None:
        raise HTTPException(404, f"Unknown city: {city_name}")
    try:
        record = await fetch_weather(city, client)
    except WeatherLookupError:
        # fetch_weather has already logged the cause
        raise HTTPException(502, FAILURE_MESSAGE) from None
    return record_to_dict(record)


@app.get("/api/health")
def get_health():
    return {"status": "ok", "timestamp": utc_now_iso()}


# ── Static dashboard ────────────────────────────────────────────


@app.get("/")
def serve_dashboard():
    if DASHBOARD_HTML.exists():
        return FileResponse(DASHBOARD_HTML, media_type="text/html")
    return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)
