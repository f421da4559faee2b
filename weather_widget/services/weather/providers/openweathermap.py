from __future__ import annotations

from typing import Any

import httpx

from weather_widget.services.weather.errors import MalformedResponseError
from weather_widget.services.weather.providers.base import WeatherProvider, round_half_up
from weather_widget.services.weather.providers.registry import register_provider


MS_TO_KMH = 3.6


def convert_openweathermap_reply(data: dict[str, Any]) -> dict[str, Any]:
    """Translate a metric-units current weather reply into the wttr.in shape."""
    try:
        main = data["main"]
        return {
            "current_condition": [
                {
                    "temp_C": round_half_up(float(main["temp"])),
                    "FeelsLikeC": round_half_up(float(main["feels_like"])),
                    "humidity": main["humidity"],
                    "pressure": main["pressure"],
                    "windspeedKmph": round_half_up(float(data["wind"]["speed"]) * MS_TO_KMH),
                    "weatherDesc": [{"value": data["weather"][0]["description"]}],
                }
            ],
            "nearest_area": [
                {
                    "areaName": [{"value": data["name"]}],
                    "country": [{"value": data["sys"]["country"]}],
                }
            ],
        }
    except (KeyError, IndexError, TypeError, ValueError) as exc:
        raise MalformedResponseError(f"openweathermap reply missing {exc}") from exc


@register_provider("openweathermap")
class OpenWeatherMapProvider(WeatherProvider):
    async def fetch(self, client: httpx.AsyncClient, city: str) -> dict[str, Any]:
        params = {
            "q": city,
            "appid": self.settings.openweathermap_api_key,
            "units": "metric",
        }
        resp = await self._get(client, self.settings.openweathermap_url, city=city, params=params)
        return convert_openweathermap_reply(self._json(resp))
