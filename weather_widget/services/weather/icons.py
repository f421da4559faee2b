from __future__ import annotations

from enum import Enum


class IconSymbol(str, Enum):
    SUN = "sun"
    PARTLY_CLOUDY = "partly-cloudy"
    CLOUDY = "cloudy"
    THUNDERSTORM = "thunderstorm"
    HEAVY_RAIN = "heavy-rain"
    RAIN = "rain"
    DRIZZLE = "drizzle"
    HEAVY_SNOW = "heavy-snow"
    SNOW = "snow"
    FOG = "fog"
    DEFAULT = "default"


ICON_GLYPHS = {
    IconSymbol.SUN: "☀️",
    IconSymbol.PARTLY_CLOUDY: "⛅",
    IconSymbol.CLOUDY: "☁️",
    IconSymbol.THUNDERSTORM: "⛈️",
    IconSymbol.HEAVY_RAIN: "⛈️",
    IconSymbol.RAIN: "🌧️",
    IconSymbol.DRIZZLE: "🌦️",
    IconSymbol.HEAVY_SNOW: "❄️",
    IconSymbol.SNOW: "❄️",
    IconSymbol.FOG: "🌫️",
    IconSymbol.DEFAULT: "🌤️",
}


# First match wins: "partly cloudy" must be seen before "cloudy",
# "heavy rain" before "rain", and "heavy snow" before "snow".
ICON_RULES: tuple[tuple[tuple[str, ...], IconSymbol], ...] = (
    (("clear", "sunny"), IconSymbol.SUN),
    (("partly cloudy", "partly"), IconSymbol.PARTLY_CLOUDY),
    (("cloudy", "overcast"), IconSymbol.CLOUDY),
    (("thunder", "storm"), IconSymbol.THUNDERSTORM),
    (("heavy rain", "downpour"), IconSymbol.HEAVY_RAIN),
    (("rain", "shower"), IconSymbol.RAIN),
    (("drizzle", "light rain"), IconSymbol.DRIZZLE),
    (("heavy snow", "blizzard"), IconSymbol.HEAVY_SNOW),
    (("snow", "sleet"), IconSymbol.SNOW),
    (("fog", "mist", "haze"), IconSymbol.FOG),
)


def classify(description: str | None) -> IconSymbol:
    desc = (description or "").casefold()
    for keywords, symbol in ICON_RULES:
        if any(keyword in desc for keyword in keywords):
            return symbol
    return IconSymbol.DEFAULT


def icon_for(description: str | None) -> str:
    return ICON_GLYPHS[classify(description)]
