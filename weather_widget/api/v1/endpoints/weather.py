from fastapi import APIRouter, Depends, Query

from weather_widget.api.v1.deps import get_weather_adapter
from weather_widget.core.config import get_settings
from weather_widget.schemas.weather import IconResponse, ValidationResult, WeatherView
from weather_widget.services.weather.adapter import WeatherSourceAdapter
from weather_widget.services.weather.icons import ICON_GLYPHS, classify
from weather_widget.services.weather.orchestrator import SearchOrchestrator
from weather_widget.services.weather.presenter import ViewStatePresenter
from weather_widget.services.weather.validation import validate_city


router = APIRouter()


@router.get("/search", response_model=WeatherView)
async def search_weather(
    city: str | None = Query(None, description="City as typed; omit to load the default city."),
    adapter: WeatherSourceAdapter = Depends(get_weather_adapter),
):
    presenter = ViewStatePresenter()
    orchestrator = SearchOrchestrator(adapter, presenter, default_city=get_settings().default_city)
    if city is None:
        await orchestrator.on_start()
    else:
        await orchestrator.on_search(city)
    return presenter.view


@router.get("/validate", response_model=ValidationResult)
async def validate(city: str = Query("")):
    return validate_city(city)


@router.get("/icon", response_model=IconResponse)
async def weather_icon(description: str = Query("", max_length=200)):
    symbol = classify(description)
    return IconResponse(symbol=symbol.value, glyph=ICON_GLYPHS[symbol])
