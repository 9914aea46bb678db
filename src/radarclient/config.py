from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from wui.config import HttpSettings, require_env


@dataclass
class RadarSettings:
    """Configuration for the Radar geocoding client."""
    api_key: str
    http: HttpSettings = field(default_factory=HttpSettings)

    @staticmethod
    def from_env(http: Optional[HttpSettings] = None) -> 'RadarSettings':
        """Create Radar settings from environment variables."""
        return RadarSettings(
            api_key=require_env('RADAR_API_KEY'),
            http=http or HttpSettings.from_env(),
        )
