from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


WTTR_BASE_URL = "https://wttr.in"
OPENWEATHERMAP_URL = "https://api.openweathermap.org/data/2.5/weather"


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHER_WIDGET_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    log_level: str = Field(default="INFO")

    # Weather provider
    provider: Literal["wttr", "openweathermap", "synthetic"] = Field(default="wttr")
    fallback_enabled: bool = Field(default=False)  # serve demo data when the provider fails
    wttr_base_url: str = Field(default=WTTR_BASE_URL)
    openweathermap_url: str = Field(default=OPENWEATHERMAP_URL)
    openweathermap_api_key: str = Field(default="demo")

    # Query run once when the widget starts
    default_city: str = Field(default="London", min_length=2, max_length=50)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_cors_origins(cls, value: Any) -> Any:
        # WEATHER_WIDGET_CORS_ORIGINS may be a JSON array or a comma-separated string.
        if not isinstance(value, str):
            return value
        parsed = value.strip()
        if parsed.startswith("["):
            try:
                return [str(x).strip() for x in json.loads(parsed) if str(x).strip()]
            except ValueError:
                pass
        return [s.strip() for s in parsed.split(",") if s.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
