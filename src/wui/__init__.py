"""
wui: current weather for wherever you are.

Core data model, provider capabilities and errors. Provider clients live in
``radarclient`` (Geocoder) and ``weatherclient`` (WeatherSource).
"""

from .api import Coordinates, CurrentWeatherData, Geocoder, TemperatureUnit, WeatherSource  # noqa: F401
from .errors import ConfigurationError, InvalidArgument, TransportError, UpstreamError, WuiError  # noqa: F401

__all__ = [
    'Coordinates', 'CurrentWeatherData', 'Geocoder', 'TemperatureUnit', 'WeatherSource',
    'WuiError', 'ConfigurationError', 'InvalidArgument', 'UpstreamError', 'TransportError',
]
