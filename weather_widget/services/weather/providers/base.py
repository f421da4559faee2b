from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from typing import Any

import httpx

from weather_widget.core.config import Settings
from weather_widget.services.weather.errors import (
    ConnectivityError,
    GenericFetchError,
    MalformedResponseError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

NOT_FOUND_STATUSES = {400, 404}


def round_half_up(value: float) -> int:
    # Halves round toward +inf: 14.5 -> 15, -0.5 -> 0.
    return int(math.floor(value + 0.5))


class WeatherProvider(ABC):
    """Fetches one city's current conditions.

    ``fetch`` always returns the reply in the wttr.in ``format=j1`` shape
    (``current_condition`` / ``nearest_area`` with single-element lists),
    whatever the upstream format.
    """

    provider_type: str
    synthetic: bool = False

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @abstractmethod
    async def fetch(self, client: httpx.AsyncClient, city: str) -> dict[str, Any]:
        """Return the raw reply for ``city`` or raise a ``WeatherFetchError``."""
        pass

    async def _get(self, client: httpx.AsyncClient, url: str, *, city: str, **kwargs) -> httpx.Response:
        try:
            resp = await client.get(url, **kwargs)
        except (httpx.NetworkError, httpx.ConnectTimeout) as exc:
            logger.warning("%s unreachable: %s", self.provider_type, type(exc).__name__)
            raise ConnectivityError() from exc
        except httpx.HTTPError as exc:
            logger.warning("%s request failed: %s", self.provider_type, type(exc).__name__)
            raise GenericFetchError() from exc

        if resp.status_code in NOT_FOUND_STATUSES:
            raise NotFoundError(city)
        if not resp.is_success:
            logger.warning("%s upstream status %s", self.provider_type, resp.status_code)
            raise GenericFetchError()
        return resp

    def _json(self, resp: httpx.Response) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as exc:
            raise MalformedResponseError(f"{self.provider_type} reply is not JSON") from exc
        if not isinstance(data, dict):
            raise MalformedResponseError(f"{self.provider_type} reply is not an object")
        return data
