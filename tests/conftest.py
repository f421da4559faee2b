import pytest
import respx

from weather_widget.core.config import Settings


@pytest.fixture(autouse=True)
def _isolate_global_respx_router():
    # Routes added via module-level respx.get() outside `with respx.mock`
    # would otherwise leak into later tests' global-router snapshots.
    yield
    respx.mock.clear()
    respx.mock.reset()


def make_wttr_reply(
    *,
    area="London",
    country="United Kingdom",
    temp_c="15",
    feels_like_c="13",
    humidity="78",
    pressure="1013",
    wind_kmph="12",
    description="Partly cloudy",
):
    return {
        "current_condition": [
            {
                "temp_C": temp_c,
                "FeelsLikeC": feels_like_c,
                "humidity": humidity,
                "pressure": pressure,
                "windspeedKmph": wind_kmph,
                "weatherDesc": [{"value": description}],
            }
        ],
        "nearest_area": [
            {
                "areaName": [{"value": area}],
                "country": [{"value": country}],
            }
        ],
    }


@pytest.fixture(name="make_wttr_reply")
def make_wttr_reply_fixture():
    return make_wttr_reply


@pytest.fixture
def wttr_london_reply():
    return make_wttr_reply()


@pytest.fixture
def owm_london_reply():
    return {
        "weather": [{"id": 803, "main": "Clouds", "description": "broken clouds"}],
        "main": {"temp": 14.5, "feels_like": 13.2, "humidity": 81, "pressure": 1012},
        "wind": {"speed": 4.1},
        "sys": {"country": "GB"},
        "name": "London",
    }


@pytest.fixture
def settings():
    return Settings(provider="wttr", fallback_enabled=False, _env_file=None)
