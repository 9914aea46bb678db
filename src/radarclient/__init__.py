"""
Radar API client for forward and IP geocoding.
Implements the wui Geocoder capability.
"""

__all__ = ['RadarClient', 'RadarSettings']

from .client import RadarClient
from .config import RadarSettings
