from __future__ import annotations

from typing import Any, Dict, Optional

from wui.api import CurrentWeatherData, TemperatureUnit, WeatherSource
from wui.config import HttpSettings
from wui.http import HttpApiClient

from .config import WeatherSettings
from .models import CurrentWeatherResponse

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

# OpenWeatherMap's own unit vocabulary; "standard" is Kelvin.
OWM_UNITS = {
    TemperatureUnit.UNSPECIFIED: 'standard',
    TemperatureUnit.KELVIN: 'standard',
    TemperatureUnit.CELSIUS: 'metric',
    TemperatureUnit.FAHRENHEIT: 'imperial',
}


class OpenWeatherMapClient(HttpApiClient, WeatherSource):
    """
    Client for the OpenWeatherMap current weather API.
    Unit conversion is done server side via the ``units`` parameter.
    """

    provider = 'openweathermap'
    secret_params = ('appid',)

    def __init__(self, api_key: str, *, lang: Optional[str] = None, http: Optional[HttpSettings] = None):
        super().__init__(api_key, http=http)
        self.lang = lang

    @classmethod
    def from_settings(cls, settings: WeatherSettings) -> 'OpenWeatherMapClient':
        return cls(settings.api_key, lang=settings.lang, http=settings.http)

    def fetch_current(self, lat: float, lon: float,
                      units: TemperatureUnit = TemperatureUnit.UNSPECIFIED) -> CurrentWeatherResponse:
        """Return the decoded provider response, for callers that want more than the core readings."""
        units = TemperatureUnit.parse(units)
        params: Dict[str, Any] = {
            'lat': lat,
            'lon': lon,
            'appid': self.api_key,
            'units': OWM_UNITS[units],
        }
        if self.lang:
            params['lang'] = self.lang
        data = self._get(CURRENT_WEATHER_URL, params=params, what='current weather request')
        return CurrentWeatherResponse.from_json(data)

    def get_current_weather(self, lat: float, lon: float,
                            units: TemperatureUnit = TemperatureUnit.UNSPECIFIED) -> CurrentWeatherData:
        units = TemperatureUnit.parse(units)
        main = self.fetch_current(lat, lon, units).main
        return CurrentWeatherData(
            units=units,
            temperature=main.temp,
            feels_like=main.feels_like,
            pressure=main.pressure,
            humidity=main.humidity,
        )
