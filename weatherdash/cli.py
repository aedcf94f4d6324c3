"""CLI entry point for the weather dashboard."""

import argparse
import asyncio
import json
import logging

from weatherdash.config.defaults import CITIES, find_city
from weatherdash.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from weatherdash.ingest.open_meteo_client import OpenMeteoClient, WeatherLookupError
from weatherdash.ingest.weather_lookup import fetch_weather
from weatherdash.presentation.formatters import format_record_text, record_to_dict

DEFAULT_CONFIG = "config.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weatherdash",
        description="Live weather dashboard for a fixed list of cities",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # cities
    sub.add_parser("cities", help="List selectable cities")

    # weather
    weather_p = sub.add_parser("weather", help="Show current weather for a city")
    weather_p.add_argument("city", help="City name, e.g. London")
    weather_p.add_argument(
        "--json", action="store_true", help="Print JSON instead of text"
    )

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard web server")
    serve_p.add_argument("--host", default=None, help="Override server.host")
    serve_p.add_argument("--port", type=int, default=None, help="Override server.port")

    # config show / config get / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. server.port")
    set_p = config_sub.add_parser("set", help="Set a config value and save it")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    config = load_config(args.config)

    logging.basicConfig(
        level=config.logging.level.value,
        format=config.logging.format,
    )

    if args.command == "cities":
        return _cmd_cities()
    elif args.command == "weather":
        return _cmd_weather(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_cities() -> int:
    for c in CITIES:
        print(f"{c.name}: {c.latitude:.4f}, {c.longitude:.4f}")
    return 0


def _cmd_weather(config, args) -> int:
    city = find_city(args.city)
    if city is None:
        names = ", ".join(c.name for c in CITIES)
        print(f"Error: unknown city {args.city!r} (choose from: {names})")
        return 1
    client = OpenMeteoClient(
        base_url=config.weather_api.base_url,
        timeout=config.weather_api.timeout_seconds,
    )
    try:
        record = asyncio.run(fetch_weather(city, client))
    except WeatherLookupError as e:
        print(f"Error: {e}")
        return 1
    if args.json:
        print(json.dumps(record_to_dict(record), indent=2, ensure_ascii=False))
    else:
        print(format_record_text(record))
    return 0


def _cmd_serve(config, args) -> int:
    import uvicorn

    from weatherdash import dashboard

    dashboard.configure(config)
    uvicorn.run(
        dashboard.app,
        host=args.host or config.server.host,
        port=args.port or config.server.port,
        log_level=config.logging.level.value.lower(),
    )
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            print(get_config_value(config, args.key))
            return 0
        except KeyError as e:
            print(f"Error: {e}")
            return 1
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
        except (KeyError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        save_config(new_config, args.config)
        print(f"Set {key.strip()} = {get_config_value(new_config, key.strip())}")
        return 0
    else:
        print("Use: config show | config get key | config set key=value")
        return 1
