import pytest

from weather_widget.services.weather.icons import ICON_GLYPHS, IconSymbol, classify, icon_for


@pytest.mark.parametrize(
    "description, expected",
    [
        ("Clear", IconSymbol.SUN),
        ("Sunny", IconSymbol.SUN),
        ("Partly cloudy", IconSymbol.PARTLY_CLOUDY),
        ("Partly cloudy with sun", IconSymbol.PARTLY_CLOUDY),
        ("Overcast", IconSymbol.CLOUDY),
        ("broken clouds", IconSymbol.DEFAULT),
        ("Thundery outbreaks possible", IconSymbol.THUNDERSTORM),
        ("Heavy rain and wind", IconSymbol.HEAVY_RAIN),
        ("Torrential downpour", IconSymbol.HEAVY_RAIN),
        ("Patchy rain possible", IconSymbol.RAIN),
        ("Light rain shower", IconSymbol.RAIN),
        ("Light drizzle", IconSymbol.DRIZZLE),
        ("Blizzard", IconSymbol.HEAVY_SNOW),
        ("Heavy snow", IconSymbol.HEAVY_SNOW),
        ("Light sleet", IconSymbol.SNOW),
        ("Mist", IconSymbol.FOG),
        ("Haze", IconSymbol.FOG),
        ("Freezing fog", IconSymbol.FOG),
        ("Tornado warning", IconSymbol.DEFAULT),
        ("", IconSymbol.DEFAULT),
    ],
)
def test_classify(description, expected):
    assert classify(description) is expected


def test_classify_is_case_insensitive():
    assert classify("HEAVY RAIN") is IconSymbol.HEAVY_RAIN
    assert classify("sUnNy") is IconSymbol.SUN


def test_rule_order_sun_before_storm():
    # "clear" is checked before "storm".
    assert classify("Clearing after storm") is IconSymbol.SUN


def test_light_rain_is_caught_by_rain_rule():
    assert classify("Light rain") is IconSymbol.RAIN


def test_vocabulary_is_closed():
    assert len(IconSymbol) == 11
    assert set(ICON_GLYPHS) == set(IconSymbol)


def test_icon_for_returns_glyph():
    assert icon_for("Sunny") == ICON_GLYPHS[IconSymbol.SUN]
    assert icon_for(None) == ICON_GLYPHS[IconSymbol.DEFAULT]
