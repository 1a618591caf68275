"""
OpenWeatherMap HTTP client — current conditions by city name.
"""
from typing import Any, Dict

import httpx

from coverage_hub.core.config import Settings
from coverage_hub.core.constants.enrichment import WEATHER_UNITS
from coverage_hub.core.exceptions import EnrichmentUnavailable


class WeatherClient:
    def __init__(self, settings: Settings) -> None:
        self._url = settings.weather_api_url
        self._api_key = settings.openweather_api_key

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    async def fetch_current_weather(self, city: str) -> Dict[str, Any]:
        """Return the raw OpenWeatherMap payload for a city (metric units).

        Raises EnrichmentUnavailable on a missing key, transport error,
        non-2xx status or a body that is not a JSON object.
        """
        if not self._api_key:
            raise EnrichmentUnavailable("weather", "OPENWEATHER_API_KEY is not configured")

        params = {"q": city, "appid": self._api_key, "units": WEATHER_UNITS}
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.get(self._url, params=params)
        except httpx.HTTPError as exc:
            raise EnrichmentUnavailable("weather", f"{type(exc).__name__}: {exc}") from exc

        if not resp.is_success:
            raise EnrichmentUnavailable(
                "weather", f"HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise EnrichmentUnavailable("weather", "response is not JSON") from exc
        if not isinstance(body, dict):
            raise EnrichmentUnavailable("weather", "response is not a JSON object")
        return body
