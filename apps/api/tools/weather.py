import logging
from typing import List, Optional

import requests

from .. import config
from ..models.schemas import CityWeather

logger = logging.getLogger(__name__)

FORECAST = "https://api.open-meteo.com/v1/forecast"

CITIES = (
    ("Kyoto", 35.0116, 135.7681),
    ("Fukuoka", 33.5904, 130.4017),
)


def condition_for(code: Optional[int]) -> str:
    # WMO weather interpretation codes, folded into three buckets
    if code is None:
        return "Unknown"
    if code <= 3:
        return "Clear"
    if code <= 48:
        return "Cloudy"
    return "Rain"


def current_weather(city: str, lat: float, lon: float) -> Optional[CityWeather]:
    try:
        r = requests.get(
            FORECAST,
            params={"latitude": lat, "longitude": lon, "current_weather": "true"},
            timeout=config.HTTP_TIMEOUT,
        )
        r.raise_for_status()
        cw = r.json()["current_weather"]
        return CityWeather(
            city=city,
            temp=round(cw["temperature"]),
            condition=condition_for(cw.get("weathercode")),
        )
    except (requests.RequestException, KeyError, TypeError, ValueError) as e:
        logger.error("weather for %s failed: %s - %s", city, type(e).__name__, e)
        return None


def trip_weather() -> List[Optional[CityWeather]]:
    return [current_weather(city, lat, lon) for city, lat, lon in CITIES]
