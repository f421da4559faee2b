from __future__ import annotations

from typing import Type

from weather_widget.services.weather.providers.base import WeatherProvider

# Registry mapping provider types to provider classes
_provider_registry: dict[str, Type[WeatherProvider]] = {}


def register_provider(provider_type: str):
    """Decorator to register a weather provider."""

    def decorator(cls: Type[WeatherProvider]):
        _provider_registry[provider_type] = cls
        cls.provider_type = provider_type
        return cls

    return decorator


def get_provider(provider_type: str) -> Type[WeatherProvider] | None:
    """Get the provider class for a provider type."""
    return _provider_registry.get(provider_type)


def list_available_providers() -> list[str]:
    return sorted(_provider_registry)
