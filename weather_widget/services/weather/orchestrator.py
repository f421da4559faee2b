from __future__ import annotations

import itertools
import logging

from weather_widget.schemas.weather import WeatherRecord
from weather_widget.services.weather.adapter import WeatherSourceAdapter
from weather_widget.services.weather.errors import (
    GENERIC_FETCH_MESSAGE,
    CityValidationError,
    WeatherFetchError,
)
from weather_widget.services.weather.presenter import Presenter
from weather_widget.services.weather.validation import ensure_valid_city

logger = logging.getLogger(__name__)

DEFAULT_CITY = "London"


class SearchOrchestrator:
    """Runs one search: validate, show loading, fetch, then render or report.

    Every search takes a sequence token. When a newer search has started by
    the time a fetch completes, the older outcome is dropped so it cannot
    overwrite what the newer one shows.
    """

    def __init__(
        self,
        adapter: WeatherSourceAdapter,
        presenter: Presenter,
        *,
        default_city: str = DEFAULT_CITY,
    ) -> None:
        self.adapter = adapter
        self.presenter = presenter
        self.default_city = default_city
        self._sequence = itertools.count(1)
        self._latest = 0

    @property
    def latest_token(self) -> int:
        return self._latest

    def _is_current(self, token: int) -> bool:
        return token == self._latest

    async def on_start(self) -> None:
        await self.on_search(self.default_city)

    async def on_search(self, raw_input: str) -> WeatherRecord | None:
        # Rejected input also supersedes any search still in flight.
        token = self._latest = next(self._sequence)
        try:
            query = ensure_valid_city(raw_input)
        except CityValidationError as exc:
            self.presenter.show_error(exc.message)
            return None

        self.presenter.clear_all()
        self.presenter.show_loading()

        try:
            record = await self.adapter.fetch_weather(query)
        except WeatherFetchError as exc:
            message = exc.message
        except Exception:
            logger.exception("Weather search for %r crashed", query)
            message = GENERIC_FETCH_MESSAGE
        else:
            if not self._is_current(token):
                logger.debug("Dropping result for %r (token %s, latest %s)", query, token, self._latest)
                return None
            self.presenter.hide_loading()
            self.presenter.show_result(record, query)
            return record

        if self._is_current(token):
            self.presenter.hide_loading()
            self.presenter.show_error(message)
        else:
            logger.debug("Dropping error for %r (token %s, latest %s)", query, token, self._latest)
        return None
