"""
Adapters: Weather service.

Implement the WeatherService port:

    OpenWeatherMapAdapter — HTTP call to an OpenWeatherMap-compatible API.
                            404 means "no data for this localization";
                            transport errors and 5xx responses are retried
                            with exponential backoff.
    RandomWeatherAdapter  — development stand-in that makes up a
                            temperature between 5 and 30 degrees.
"""

import asyncio
import logging
import random
from typing import Any, Optional

import httpx

from packit.application.packing.dtos import WeatherDto
from packit.application.packing.ports import WeatherService
from packit.domain.packing.errors import WeatherServiceUnavailableError
from packit.domain.packing.value_objects import Localization

logger = logging.getLogger(__name__)

HTTP_404 = 404
HTTP_500 = 500


class OpenWeatherMapAdapter(WeatherService):
    """Weather lookup against an OpenWeatherMap-compatible ``/weather`` endpoint.

    Args:
        base_url: API root, e.g. ``https://api.openweathermap.org/data/2.5``.
        api_key: Optional API key sent as ``appid``. Never logged.
        timeout: HTTP timeout in seconds for each attempt.
        max_retries: Extra attempts after the first one on transient failures.
        backoff_seconds: Delay before the first retry; doubles each retry.
    """

    def __init__(
        self,
        base_url: str,
        api_key: Optional[str] = None,
        timeout: float = 5.0,
        max_retries: int = 3,
        backoff_seconds: float = 0.5,
    ) -> None:
        self._url = f"{base_url.rstrip('/')}/weather"
        self._api_key = api_key
        self._timeout = timeout
        self._max_retries = max_retries
        self._backoff_seconds = backoff_seconds

    async def get_weather(self, localization: Localization) -> Optional[WeatherDto]:
        """Return the current temperature at the localization.

        Returns:
            WeatherDto, or None when the provider knows no such place.

        Raises:
            WeatherServiceUnavailableError: If every attempt failed transiently.
            httpx.HTTPStatusError: On other non-success responses (e.g. 401).
        """
        params = {"q": str(localization), "units": "metric"}
        if self._api_key:
            params["appid"] = self._api_key

        attempts = self._max_retries + 1
        last_error = ""

        for attempt in range(1, attempts + 1):
            try:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    resp = await client.get(self._url, params=params)
            except httpx.TransportError as exc:
                last_error = str(exc) or type(exc).__name__
                logger.warning(
                    "Weather request for %s failed (attempt %d/%d): %s",
                    localization,
                    attempt,
                    attempts,
                    last_error,
                )
            else:
                if resp.status_code == HTTP_404:
                    logger.info("No weather data for localization=%s", localization)
                    return None
                if resp.status_code < HTTP_500:
                    resp.raise_for_status()
                    return self._parse(resp.json(), localization)

                last_error = f"HTTP {resp.status_code}"
                logger.warning(
                    "Weather provider returned %s for %s (attempt %d/%d)",
                    resp.status_code,
                    localization,
                    attempt,
                    attempts,
                )

            if attempt < attempts:
                await asyncio.sleep(self._backoff_seconds * 2 ** (attempt - 1))

        raise WeatherServiceUnavailableError(last_error)

    @staticmethod
    def _parse(payload: dict[str, Any], localization: Localization) -> Optional[WeatherDto]:
        try:
            temperature = float(payload["main"]["temp"])
        except (KeyError, TypeError, ValueError):
            logger.warning("Weather payload for %s has no temperature", localization)
            return None
        return WeatherDto(temperature=temperature)


class RandomWeatherAdapter(WeatherService):
    """Makes up a whole-degree temperature in [5, 30] for any localization."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    async def get_weather(self, localization: Localization) -> Optional[WeatherDto]:
        temperature = self._rng.randint(5, 30)
        logger.debug("Random weather for %s: %d", localization, temperature)
        return WeatherDto(temperature=float(temperature))
