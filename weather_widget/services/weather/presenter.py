from __future__ import annotations

from datetime import datetime, timezone as dt_timezone
from typing import Callable, Protocol

from weather_widget.schemas.weather import WeatherDisplay, WeatherRecord, WeatherView
from weather_widget.services.weather.icons import ICON_GLYPHS, classify


DEMO_DATA_SUFFIX = " (Demo Data)"


class Presenter(Protocol):
    """Everything the search flow may ask of the UI."""

    def show_loading(self) -> None: ...

    def hide_loading(self) -> None: ...

    def show_result(self, record: WeatherRecord, original_query: str) -> None: ...

    def show_error(self, message: str) -> None: ...

    def clear_all(self) -> None: ...


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"


def _utc_now() -> datetime:
    return datetime.now(dt_timezone.utc)


def build_display(record: WeatherRecord, original_query: str, observed_at: datetime) -> WeatherDisplay:
    city_label = f"{record.location_name}, {record.country_name}"
    if record.is_synthetic_fallback:
        city_label += DEMO_DATA_SUFFIX

    symbol = classify(record.description)
    return WeatherDisplay(
        query=original_query,
        city_label=city_label,
        observed_at=f"{observed_at:%Y-%m-%d} • {observed_at:%H:%M:%S}",
        temperature=str(record.temperature_c),
        icon=ICON_GLYPHS[symbol],
        icon_symbol=symbol.value,
        description=record.description,
        feels_like=f"{record.feels_like_c}°C",
        humidity=f"{record.humidity_pct}%",
        wind_speed=f"{_format_number(record.wind_speed_kmh)} km/h",
        pressure=f"{_format_number(record.pressure_mb)} mb",
    )


class ViewStatePresenter:
    """Writes the loading/error/result state into an injected ``WeatherView``."""

    def __init__(self, view: WeatherView | None = None, *, clock: Callable[[], datetime] = _utc_now) -> None:
        self.view = view if view is not None else WeatherView()
        self._clock = clock

    def show_loading(self) -> None:
        self.view.loading = True

    def hide_loading(self) -> None:
        self.view.loading = False

    def show_result(self, record: WeatherRecord, original_query: str) -> None:
        self.view.display = build_display(record, original_query, self._clock())
        self.view.loading = False
        self.view.result_visible = True
        self.view.error_visible = False
        self.view.error_message = None

    def show_error(self, message: str) -> None:
        self.view.error_message = message
        self.view.error_visible = True
        self.view.result_visible = False
        self.view.loading = False

    def clear_all(self) -> None:
        self.view.loading = False
        self.view.result_visible = False
        self.view.error_visible = False
        self.view.error_message = None
        self.view.display = None
