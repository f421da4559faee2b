from __future__ import annotations

from typing import Any

import httpx

from weather_widget.services.weather.providers.base import WeatherProvider
from weather_widget.services.weather.providers.registry import register_provider


DEMO_WEATHER: dict[str, dict[str, str]] = {
    "london": {
        "temp_C": "15",
        "FeelsLikeC": "13",
        "humidity": "78",
        "pressure": "1013",
        "windspeedKmph": "12",
        "weatherDesc": "Partly cloudy",
        "areaName": "London",
        "country": "United Kingdom",
    },
    "tokyo": {
        "temp_C": "22",
        "FeelsLikeC": "24",
        "humidity": "65",
        "pressure": "1015",
        "windspeedKmph": "8",
        "weatherDesc": "Clear",
        "areaName": "Tokyo",
        "country": "Japan",
    },
    "new york": {
        "temp_C": "18",
        "FeelsLikeC": "16",
        "humidity": "72",
        "pressure": "1012",
        "windspeedKmph": "15",
        "weatherDesc": "Light rain",
        "areaName": "New York",
        "country": "United States",
    },
    "paris": {
        "temp_C": "12",
        "FeelsLikeC": "10",
        "humidity": "80",
        "pressure": "1010",
        "windspeedKmph": "10",
        "weatherDesc": "Overcast",
        "areaName": "Paris",
        "country": "France",
    },
    "sydney": {
        "temp_C": "25",
        "FeelsLikeC": "27",
        "humidity": "60",
        "pressure": "1018",
        "windspeedKmph": "6",
        "weatherDesc": "Sunny",
        "areaName": "Sydney",
        "country": "Australia",
    },
}


def _default_entry(city: str) -> dict[str, str]:
    return {
        "temp_C": "20",
        "FeelsLikeC": "19",
        "humidity": "70",
        "pressure": "1013",
        "windspeedKmph": "10",
        "weatherDesc": "Partly cloudy",
        "areaName": city,
        "country": "Unknown",
    }


def synthetic_reply(city: str) -> dict[str, Any]:
    entry = DEMO_WEATHER.get(city.strip().lower()) or _default_entry(city.strip())
    return {
        "current_condition": [
            {
                "temp_C": entry["temp_C"],
                "FeelsLikeC": entry["FeelsLikeC"],
                "humidity": entry["humidity"],
                "pressure": entry["pressure"],
                "windspeedKmph": entry["windspeedKmph"],
                "weatherDesc": [{"value": entry["weatherDesc"]}],
            }
        ],
        "nearest_area": [
            {
                "areaName": [{"value": entry["areaName"]}],
                "country": [{"value": entry["country"]}],
            }
        ],
    }


@register_provider("synthetic")
class SyntheticProvider(WeatherProvider):
    """Local demo data; never touches the network."""

    synthetic = True

    async def fetch(self, client: httpx.AsyncClient | None, city: str) -> dict[str, Any]:
        return synthetic_reply(city)
