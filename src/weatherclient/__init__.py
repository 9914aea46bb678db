"""
Weather API client for current conditions (OpenWeatherMap).
Implements the wui WeatherSource capability.
"""

__all__ = ['OpenWeatherMapClient', 'WeatherSettings', 'CurrentWeatherResponse']

from .client import OpenWeatherMapClient
from .config import WeatherSettings
from .models import CurrentWeatherResponse
