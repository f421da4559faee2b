from __future__ import annotations

# Import to register providers
from weather_widget.services.weather.providers import openweathermap, synthetic, wttr  # noqa: F401
from weather_widget.services.weather.providers.base import WeatherProvider
from weather_widget.services.weather.providers.registry import (
    get_provider,
    list_available_providers,
    register_provider,
)

__all__ = [
    "WeatherProvider",
    "register_provider",
    "get_provider",
    "list_available_providers",
]
