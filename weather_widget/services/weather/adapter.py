from __future__ import annotations

import logging
import math
from typing import Any, Callable

import httpx
from pydantic import ValidationError

from weather_widget.core.config import Settings
from weather_widget.core.http import get_http_client
from weather_widget.schemas.weather import WeatherRecord
from weather_widget.services.weather.errors import (
    GenericFetchError,
    MalformedResponseError,
    WeatherFetchError,
)
from weather_widget.services.weather.providers import WeatherProvider, get_provider, list_available_providers
from weather_widget.services.weather.providers.base import round_half_up
from weather_widget.services.weather.providers.synthetic import SyntheticProvider

logger = logging.getLogger(__name__)


def _first(seq: Any, field: str) -> dict[str, Any]:
    if not isinstance(seq, list) or not seq or not isinstance(seq[0], dict):
        raise MalformedResponseError(f"missing {field}")
    return seq[0]


def _value(obj: dict[str, Any], field: str) -> str:
    value = _first(obj.get(field), field).get("value")
    if value is None:
        raise MalformedResponseError(f"missing {field} value")
    return str(value).strip()


def _number(obj: dict[str, Any], field: str) -> float:
    raw = obj.get(field)
    if raw is None or isinstance(raw, bool):
        raise MalformedResponseError(f"missing {field}")
    try:
        value = float(str(raw).strip())
    except ValueError as exc:
        raise MalformedResponseError(f"{field} is not numeric: {raw!r}") from exc
    if not math.isfinite(value):
        raise MalformedResponseError(f"{field} is not finite: {raw!r}")
    return value


def normalize_reply(raw: Any, *, synthetic: bool = False) -> WeatherRecord:
    """Build a ``WeatherRecord`` from a wttr.in-shaped reply.

    Scalars arrive wrapped in single-element lists (``[{"value": ...}]``) and
    numbers may be strings. Anything missing or unparseable raises
    ``MalformedResponseError``; no field is ever defaulted.
    """
    if not isinstance(raw, dict):
        raise MalformedResponseError("reply is not an object")

    current = _first(raw.get("current_condition"), "current_condition")
    area = _first(raw.get("nearest_area"), "nearest_area")

    try:
        return WeatherRecord(
            location_name=_value(area, "areaName"),
            country_name=_value(area, "country"),
            temperature_c=round_half_up(_number(current, "temp_C")),
            feels_like_c=round_half_up(_number(current, "FeelsLikeC")),
            humidity_pct=round_half_up(_number(current, "humidity")),
            wind_speed_kmh=_number(current, "windspeedKmph"),
            pressure_mb=_number(current, "pressure"),
            description=_value(current, "weatherDesc"),
            is_synthetic_fallback=synthetic,
        )
    except ValidationError as exc:
        raise MalformedResponseError(f"out-of-range field: {exc.errors()[0].get('loc')}") from exc


class WeatherSourceAdapter:
    """Turns a city name into a ``WeatherRecord`` using one provider.

    With a ``fallback`` provider configured, every live failure is absorbed
    and the fallback's reply is returned flagged as synthetic. Without one,
    failures surface as ``WeatherFetchError`` subclasses.
    """

    def __init__(
        self,
        provider: WeatherProvider,
        *,
        fallback: WeatherProvider | None = None,
        client: httpx.AsyncClient | None = None,
        client_factory: Callable[[], httpx.AsyncClient] = get_http_client,
    ) -> None:
        self.provider = provider
        self.fallback = fallback
        self._client = client
        self._client_factory = client_factory

    def _client_for(self, provider: WeatherProvider) -> httpx.AsyncClient | None:
        if provider.synthetic:
            return None
        return self._client or self._client_factory()

    async def _fetch_live(self, city: str) -> WeatherRecord:
        try:
            raw = await self.provider.fetch(self._client_for(self.provider), city)
            return normalize_reply(raw, synthetic=self.provider.synthetic)
        except WeatherFetchError:
            raise
        except Exception as exc:
            logger.exception("Unexpected error from %s provider", self.provider.provider_type)
            raise GenericFetchError() from exc

    async def fetch_weather(self, city: str) -> WeatherRecord:
        city = city.strip()
        try:
            return await self._fetch_live(city)
        except WeatherFetchError as exc:
            if self.fallback is None:
                logger.warning("Weather lookup for %r failed: %s", city, exc)
                raise
            logger.info("%s failed for %r (%s), using demo data", self.provider.provider_type, city, exc)

        raw = await self.fallback.fetch(self._client_for(self.fallback), city)
        return normalize_reply(raw, synthetic=True)


def build_weather_adapter(settings: Settings, *, client: httpx.AsyncClient | None = None) -> WeatherSourceAdapter:
    provider_cls = get_provider(settings.provider)
    if provider_cls is None:
        available = ", ".join(list_available_providers())
        raise ValueError(f"Unknown weather provider: {settings.provider} (available: {available})")
    fallback = SyntheticProvider(settings) if settings.fallback_enabled and not provider_cls.synthetic else None
    return WeatherSourceAdapter(provider_cls(settings), fallback=fallback, client=client)
