"""
Provider-agnostic data model and capabilities.

Geocoders turn a query (or the caller's IP) into coordinates; weather sources
turn coordinates into current conditions. Concrete providers live in their own
client packages (``radarclient``, ``weatherclient``).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidArgument


class TemperatureUnit(str, Enum):
    UNSPECIFIED = ''
    KELVIN = 'kelvin'
    CELSIUS = 'celsius'
    FAHRENHEIT = 'fahrenheit'

    @classmethod
    def parse(cls, value: Union['TemperatureUnit', str, None]) -> 'TemperatureUnit':
        """Accept a member, its string value (case-insensitive) or None."""
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.UNSPECIFIED
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ', '.join(repr(u.value) for u in cls)
            raise InvalidArgument(f"unknown temperature unit {value!r}; expected one of {valid}") from None


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CurrentWeatherData:
    """Snapshot of current conditions in the units the caller asked for."""
    units: TemperatureUnit
    temperature: float
    feels_like: float
    pressure: int  # hPa
    humidity: int  # %


class Geocoder(ABC):

    @abstractmethod
    def geocode(self, query: str) -> Coordinates:
        """Resolve a free-text location to the provider's best match."""

    @abstractmethod
    def geocode_ip(self) -> Coordinates:
        """Resolve the caller's current public IP address."""


class WeatherSource(ABC):

    @abstractmethod
    def get_current_weather(self, lat: float, lon: float,
                            units: TemperatureUnit = TemperatureUnit.UNSPECIFIED) -> CurrentWeatherData:
        """Fetch current conditions at (lat, lon) converted to ``units`` by the provider."""


__all__ = ['TemperatureUnit', 'Coordinates', 'CurrentWeatherData', 'Geocoder', 'WeatherSource']
