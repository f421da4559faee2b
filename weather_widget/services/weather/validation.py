from __future__ import annotations

import re

from weather_widget.schemas.weather import ValidationResult
from weather_widget.services.weather.errors import CityValidationError


MIN_CITY_LENGTH = 2
MAX_CITY_LENGTH = 50

# Letters, spaces, hyphens, apostrophes and periods; ASCII only.
_CITY_PATTERN = re.compile(r"^[A-Za-z\s\-'.]+$", re.ASCII)


def validate_city(raw: str) -> ValidationResult:
    city = (raw or "").strip()

    if not city:
        return ValidationResult(valid=False, message="Please enter a city name")
    if len(city) < MIN_CITY_LENGTH:
        return ValidationResult(valid=False, message="City name must be at least 2 characters long")
    if len(city) > MAX_CITY_LENGTH:
        return ValidationResult(valid=False, message="City name is too long")
    if not _CITY_PATTERN.match(city):
        return ValidationResult(valid=False, message="City name contains invalid characters")

    return ValidationResult(valid=True, message="")


def ensure_valid_city(raw: str) -> str:
    """Return the trimmed city or raise ``CityValidationError``."""
    result = validate_city(raw)
    if not result.valid:
        raise CityValidationError(result.message)
    return (raw or "").strip()
