from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WeatherRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    location_name: str = Field(..., min_length=1, description="Resolved place name.")
    country_name: str = Field(..., description="Resolved country or region.")
    temperature_c: int = Field(..., description="Air temperature (C), rounded.")
    feels_like_c: int = Field(..., description="Apparent temperature (C), rounded.")
    humidity_pct: int = Field(..., ge=0, le=100, description="Relative humidity (%).")
    wind_speed_kmh: float = Field(..., ge=0, description="Wind speed (km/h).")
    pressure_mb: float = Field(..., gt=0, description="Pressure (mb).")
    description: str = Field(..., description="Free-text condition, e.g. 'Partly cloudy'.")
    is_synthetic_fallback: bool = Field(False, description="True when served from demo data.")


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    message: str = ""

    @model_validator(mode="after")
    def _check_message(self) -> "ValidationResult":
        if self.valid and self.message:
            raise ValueError("a valid result carries no message")
        if not self.valid and not self.message:
            raise ValueError("an invalid result needs a message")
        return self


class WeatherDisplay(BaseModel):
    query: str
    city_label: str
    observed_at: str
    temperature: str
    icon: str
    icon_symbol: str
    description: str
    feels_like: str
    humidity: str
    wind_speed: str
    pressure: str


class WeatherView(BaseModel):
    loading: bool = False
    result_visible: bool = False
    error_visible: bool = False
    error_message: str | None = None
    display: WeatherDisplay | None = None


class IconResponse(BaseModel):
    symbol: str
    glyph: str
