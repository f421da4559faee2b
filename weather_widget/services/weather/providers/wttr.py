from __future__ import annotations

from typing import Any
from urllib.parse import quote

import httpx

from weather_widget.services.weather.errors import MalformedResponseError, NotFoundError
from weather_widget.services.weather.providers.base import WeatherProvider
from weather_widget.services.weather.providers.registry import register_provider


UNKNOWN_LOCATION_MARKERS = ("unknown location", "unable to find any matching weather location")


def _signals_unknown_location(data: dict[str, Any]) -> bool:
    # Upstream WWO-style error payload: {"data": {"error": [{"msg": "..."}]}}
    inner = data.get("data")
    if not isinstance(inner, dict):
        return False
    for err in inner.get("error") or []:
        if not isinstance(err, dict):
            continue
        msg = str(err.get("msg", "")).casefold()
        if any(marker in msg for marker in UNKNOWN_LOCATION_MARKERS):
            return True
    return False


@register_provider("wttr")
class WttrProvider(WeatherProvider):
    """wttr.in JSON endpoint; the reply already has the internal raw shape."""

    def url_for(self, city: str) -> str:
        return f"{self.settings.wttr_base_url.rstrip('/')}/{quote(city)}"

    async def fetch(self, client: httpx.AsyncClient, city: str) -> dict[str, Any]:
        resp = await self._get(client, self.url_for(city), city=city, params={"format": "j1"})
        try:
            data = self._json(resp)
        except MalformedResponseError:
            if any(marker in resp.text.casefold() for marker in UNKNOWN_LOCATION_MARKERS):
                raise NotFoundError(city)
            raise

        if _signals_unknown_location(data):
            raise NotFoundError(city)
        return data
