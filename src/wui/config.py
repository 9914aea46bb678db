from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from .errors import ConfigurationError


def require_env(name: str) -> str:
    """Return a required, non-empty environment variable."""
    value = os.environ.get(name, '').strip()
    if not value:
        raise ConfigurationError(f"{name} not set in env")
    return value


def _parse_env(name: str, default, cast):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"Malformed {name}={raw!r}: {e}") from e


@dataclass
class HttpSettings:
    """Transport options shared by every provider client."""
    timeout: float = 30.0  # seconds; applies to connect and read
    max_attempts: int = 1  # 1 = no retry on network failures

    def __post_init__(self):
        if self.timeout <= 0:
            raise ConfigurationError(f"http timeout must be positive, got {self.timeout}")
        if self.max_attempts < 1:
            raise ConfigurationError(f"http max_attempts must be >= 1, got {self.max_attempts}")

    @staticmethod
    def from_env() -> 'HttpSettings':
        return HttpSettings(
            timeout=_parse_env('WUI_HTTP_TIMEOUT', 30.0, float),
            max_attempts=_parse_env('WUI_HTTP_MAX_ATTEMPTS', 1, int),
        )


@dataclass
class Settings:
    """
    Everything the command line entry point needs, loaded once at startup.
    Clients never read the environment themselves; they receive these values.
    """
    radar: 'RadarSettings'
    weather: 'WeatherSettings'
    http: HttpSettings = field(default_factory=HttpSettings)

    @staticmethod
    def from_env(http: Optional[HttpSettings] = None) -> 'Settings':
        # Imported here: the client packages depend on this module.
        from radarclient.config import RadarSettings
        from weatherclient.config import WeatherSettings

        http = http or HttpSettings.from_env()
        return Settings(
            radar=RadarSettings.from_env(http),
            weather=WeatherSettings.from_env(http),
            http=http,
        )


__all__ = ['HttpSettings', 'Settings', 'require_env']
