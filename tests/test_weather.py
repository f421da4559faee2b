import httpx
import pytest
import respx
from httpx import ASGITransport, AsyncClient, Response

from weather_widget.core.config import Settings, get_settings
from weather_widget.core.http import get_http_client
from weather_widget.main import create_app
from weather_widget.services.weather.adapter import build_weather_adapter


def _app_with_adapter(upstream, **overrides):
    app = create_app()
    settings = Settings(_env_file=None, **overrides)
    app.state.weather_adapter = build_weather_adapter(settings, client=upstream)
    return app


@pytest.mark.asyncio
async def test_weather_search_success(wttr_london_reply):
    with respx.mock:
        respx.get("https://wttr.in/London").mock(return_value=Response(200, json=wttr_london_reply))

        async with httpx.AsyncClient() as upstream:
            app = _app_with_adapter(upstream, provider="wttr")
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                r = await client.get("/api/v1/weather/search", params={"city": "London"})

    assert r.status_code == 200
    body = r.json()
    assert body["loading"] is False
    assert body["result_visible"] is True
    assert body["error_visible"] is False
    assert body["display"]["city_label"] == "London, United Kingdom"
    assert body["display"]["temperature"] == "15"
    assert body["display"]["wind_speed"] == "12 km/h"
    assert body["display"]["icon_symbol"] == "partly-cloudy"


@pytest.mark.asyncio
async def test_weather_search_without_city_loads_default(wttr_london_reply):
    with respx.mock:
        route = respx.get("https://wttr.in/London").mock(return_value=Response(200, json=wttr_london_reply))

        async with httpx.AsyncClient() as upstream:
            app = _app_with_adapter(upstream, provider="wttr")
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                r = await client.get("/api/v1/weather/search")

    assert route.called
    assert r.json()["display"]["query"] == "London"


@pytest.mark.asyncio
async def test_weather_search_empty_city_reports_error_without_upstream_call():
    with respx.mock(assert_all_called=False):
        route = respx.get("https://wttr.in/London")

        async with httpx.AsyncClient() as upstream:
            app = _app_with_adapter(upstream, provider="wttr")
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                r = await client.get("/api/v1/weather/search", params={"city": ""})

    assert not route.called
    body = r.json()
    assert body["error_visible"] is True
    assert body["error_message"] == "Please enter a city name"
    assert body["display"] is None


@pytest.mark.asyncio
async def test_weather_search_upstream_down_with_fallback():
    with respx.mock:
        respx.get("https://wttr.in/Sydney").mock(side_effect=httpx.ConnectError)

        async with httpx.AsyncClient() as upstream:
            app = _app_with_adapter(upstream, provider="wttr", fallback_enabled=True)
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                r = await client.get("/api/v1/weather/search", params={"city": "Sydney"})

    body = r.json()
    assert body["result_visible"] is True
    assert body["display"]["city_label"] == "Sydney, Australia (Demo Data)"
    assert body["display"]["icon_symbol"] == "sun"


@pytest.mark.asyncio
async def test_weather_search_upstream_down_without_fallback():
    with respx.mock:
        respx.get("https://wttr.in/Sydney").mock(side_effect=httpx.ConnectError)

        async with httpx.AsyncClient() as upstream:
            app = _app_with_adapter(upstream, provider="wttr", fallback_enabled=False)
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                r = await client.get("/api/v1/weather/search", params={"city": "Sydney"})

    body = r.json()
    assert body["loading"] is False
    assert body["error_message"] == (
        "Unable to connect to weather service. Please check your internet connection."
    )


@pytest.mark.asyncio
async def test_weather_validate_and_icon_endpoints():
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.get("/api/v1/weather/validate", params={"city": "St. Anne's"})
        assert r.json() == {"valid": True, "message": ""}

        r = await client.get("/api/v1/weather/validate", params={"city": "x" * 51})
        assert r.json() == {"valid": False, "message": "City name is too long"}

        r = await client.get("/api/v1/weather/icon", params={"description": "Heavy rain and wind"})
        assert r.json()["symbol"] == "heavy-rain"
        assert r.json()["glyph"]


@pytest.mark.asyncio
async def test_lifespan_wires_adapter_and_closes_client(monkeypatch, wttr_london_reply):
    monkeypatch.setenv("WEATHER_WIDGET_PROVIDER", "wttr")
    monkeypatch.setenv("WEATHER_WIDGET_FALLBACK_ENABLED", "false")
    get_settings.cache_clear()
    try:
        app = create_app()
        with respx.mock:
            route = respx.get("https://wttr.in/London").mock(return_value=Response(200, json=wttr_london_reply))

            async with app.router.lifespan_context(app):
                upstream = get_http_client()
                assert app.state.settings.provider == "wttr"
                assert app.state.weather_adapter is not None
                async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
                    r = await client.get("/api/v1/weather/search", params={"city": "London"})

        assert route.call_count == 1
        assert r.json()["display"]["city_label"] == "London, United Kingdom"
        assert upstream.is_closed
        with pytest.raises(RuntimeError):
            get_http_client()
    finally:
        get_settings.cache_clear()
