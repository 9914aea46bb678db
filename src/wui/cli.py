"""Print current weather at the caller's location.

Usage (example):
    wui --units celsius
    python -m wui --query "Oxford, OH" --details

Requires RADAR_API_KEY and OWM_API_KEY (read from the environment or an .env file).
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from radarclient.client import RadarClient
from weatherclient.client import OpenWeatherMapClient

from .api import CurrentWeatherData, Geocoder, TemperatureUnit, WeatherSource
from .config import Settings
from .errors import WuiError

logger = logging.getLogger("wui.cli")


def run(geocoder: Geocoder, weather_source: WeatherSource,
        units: TemperatureUnit = TemperatureUnit.FAHRENHEIT, query: Optional[str] = None) -> CurrentWeatherData:
    """Resolve coordinates (by IP unless ``query`` is given) and fetch the weather there."""
    coords = geocoder.geocode(query) if query is not None else geocoder.geocode_ip()
    logger.info("Using coordinates %.4f, %.4f", coords.latitude, coords.longitude)
    return weather_source.get_current_weather(coords.latitude, coords.longitude, units)


def format_report(weather: CurrentWeatherData, details: bool = False) -> str:
    lines = [f"The temperature is {weather.temperature:f} and it feels like {weather.feels_like:f}"]
    if details:
        lines.append(f"Pressure: {weather.pressure} hPa")
        lines.append(f"Humidity: {weather.humidity}%")
    return '\n'.join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='wui', description="Current weather at your location.")
    parser.add_argument('--query', help="Location to geocode instead of the caller's IP address")
    parser.add_argument(
        '--units',
        choices=[u.value for u in TemperatureUnit if u is not TemperatureUnit.UNSPECIFIED],
        default=TemperatureUnit.FAHRENHEIT.value,
    )
    parser.add_argument('--env-file', default='.env', help="dotenv file to load (existing env vars win)")
    parser.add_argument('--details', action='store_true', help="Also print pressure and humidity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(args.env_file)
    log_level = (os.environ.get("LOG_LEVEL") or "WARNING").strip().upper()
    known_level = isinstance(logging.getLevelName(log_level), int)
    logging.basicConfig(level=log_level if known_level else "WARNING")
    if not known_level:
        logger.warning("Unknown LOG_LEVEL %r, using WARNING", log_level)

    try:
        settings = Settings.from_env()
        with RadarClient.from_settings(settings.radar) as geocoder, \
                OpenWeatherMapClient.from_settings(settings.weather) as weather_source:
            weather = run(geocoder, weather_source, TemperatureUnit(args.units), query=args.query)
    except WuiError as e:
        logger.error("%s: %s", type(e).__name__, e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(format_report(weather, details=args.details))
    return 0
