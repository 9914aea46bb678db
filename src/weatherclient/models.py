"""Subset of the OpenWeatherMap current weather payload we decode."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from wui.errors import UpstreamError


def _opt(obj: Dict[str, Any], key: str, cast):
    value = obj.get(key)
    if value is None:
        return None
    try:
        return cast(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _obj(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


@dataclass(frozen=True)
class Main:
    temp: float
    feels_like: float
    pressure: int  # hPa, sea level
    humidity: int  # %
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    sea_level: Optional[int] = None
    grnd_level: Optional[int] = None

    @staticmethod
    def from_json(obj: Any) -> 'Main':
        if not isinstance(obj, dict):
            raise UpstreamError(f"current weather `main` field was not an object: {obj!r}")
        missing = [k for k in ('temp', 'feels_like', 'pressure', 'humidity') if obj.get(k) is None]
        if missing:
            raise UpstreamError(
                f"current weather `main` field is missing {', '.join(missing)}; got keys {sorted(obj)}"
            )
        try:
            return Main(
                temp=float(obj['temp']),
                feels_like=float(obj['feels_like']),
                pressure=int(obj['pressure']),
                humidity=int(obj['humidity']),
                temp_min=_opt(obj, 'temp_min', float),
                temp_max=_opt(obj, 'temp_max', float),
                sea_level=_opt(obj, 'sea_level', int),
                grnd_level=_opt(obj, 'grnd_level', int),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise UpstreamError(f"current weather `main` field had non-numeric values: {obj!r}") from e


@dataclass(frozen=True)
class Condition:
    id: Optional[int]
    main: str
    description: str
    icon: str


@dataclass(frozen=True)
class Wind:
    speed: Optional[float] = None  # m/s for standard/metric, mph for imperial
    deg: Optional[int] = None
    gust: Optional[float] = None


@dataclass(frozen=True)
class CurrentWeatherResponse:
    main: Main
    lat: Optional[float] = None
    lon: Optional[float] = None
    conditions: List[Condition] = field(default_factory=list)
    wind: Wind = field(default_factory=Wind)
    visibility: Optional[int] = None  # metres, capped at 10km
    name: Optional[str] = None

    @staticmethod
    def from_json(data: Dict[str, Any]) -> 'CurrentWeatherResponse':
        """Decode a response body; ``main`` is required, everything else is best effort."""
        if data.get('main') is None:
            raise UpstreamError(f"current weather response did not have a `main` field; got keys {sorted(data)}")
        main = Main.from_json(data['main'])

        coord = _obj(data.get('coord'))
        wind = _obj(data.get('wind'))
        weather = data.get('weather')
        name = data.get('name')
        conditions = [
            Condition(
                id=_opt(w, 'id', int),
                main=w.get('main', ''),
                description=w.get('description', ''),
                icon=w.get('icon', ''),
            )
            for w in (weather if isinstance(weather, list) else []) if isinstance(w, dict)
        ]
        return CurrentWeatherResponse(
            main=main,
            lat=_opt(coord, 'lat', float),
            lon=_opt(coord, 'lon', float),
            conditions=conditions,
            wind=Wind(
                speed=_opt(wind, 'speed', float),
                deg=_opt(wind, 'deg', int),
                gust=_opt(wind, 'gust', float),
            ),
            visibility=_opt(data, 'visibility', int),
            name=name if isinstance(name, str) and name else None,
        )
