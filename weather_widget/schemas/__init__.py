from __future__ import annotations

from weather_widget.schemas.weather import (
    IconResponse,
    ValidationResult,
    WeatherDisplay,
    WeatherRecord,
    WeatherView,
)

__all__ = ["IconResponse", "ValidationResult", "WeatherDisplay", "WeatherRecord", "WeatherView"]
