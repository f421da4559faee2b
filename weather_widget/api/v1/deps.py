from __future__ import annotations

from fastapi import Request

from weather_widget.core.config import get_settings
from weather_widget.services.weather.adapter import WeatherSourceAdapter, build_weather_adapter


def get_weather_adapter(request: Request) -> WeatherSourceAdapter:
    """Adapter built at startup; falls back to one built from current settings."""
    adapter = getattr(request.app.state, "weather_adapter", None)
    if adapter is None:
        adapter = build_weather_adapter(get_settings())
        request.app.state.weather_adapter = adapter
    return adapter
