from __future__ import annotations


GENERIC_FETCH_MESSAGE = "Unable to fetch weather data. Please try again later."
CONNECTIVITY_MESSAGE = "Unable to connect to weather service. Please check your internet connection."
NOT_FOUND_MESSAGE = "City '{city}' not found. Please check the spelling and try again."


class WeatherWidgetError(Exception):
    """Base error; ``message`` is safe to show to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CityValidationError(WeatherWidgetError):
    """The typed city name failed the syntactic checks."""


class WeatherFetchError(WeatherWidgetError):
    """Any failure between sending the provider request and building a record."""

    def __init__(self, message: str = GENERIC_FETCH_MESSAGE) -> None:
        super().__init__(message)


class ConnectivityError(WeatherFetchError):
    def __init__(self, message: str = CONNECTIVITY_MESSAGE) -> None:
        super().__init__(message)


class NotFoundError(WeatherFetchError):
    def __init__(self, city: str) -> None:
        super().__init__(NOT_FOUND_MESSAGE.format(city=city))
        self.city = city


class MalformedResponseError(WeatherFetchError):
    """The provider answered but the reply lacks required fields."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(GENERIC_FETCH_MESSAGE)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.message} ({self.detail})" if self.detail else self.message


class GenericFetchError(WeatherFetchError):
    pass
