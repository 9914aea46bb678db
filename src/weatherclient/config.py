from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from wui.config import HttpSettings, require_env


@dataclass
class WeatherSettings:
    """Configuration for the OpenWeatherMap client."""
    api_key: str
    lang: Optional[str] = None  # e.g. 'de'; affects condition descriptions only
    http: HttpSettings = field(default_factory=HttpSettings)

    @staticmethod
    def from_env(http: Optional[HttpSettings] = None) -> 'WeatherSettings':
        """Create weather settings from environment variables."""
        return WeatherSettings(
            api_key=require_env('OWM_API_KEY'),
            lang=os.environ.get('OWM_LANG') or None,
            http=http or HttpSettings.from_env(),
        )
