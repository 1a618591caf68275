"""
Enrichment service — weather and crypto lookups with raw-response logging.

Each lookup returns a LookupResult instead of raising: Available(payload) on
success, Unavailable(reason) otherwise. Successful payloads are recorded in
the API call store as fire-and-forget writes; a failed write never changes
what the lookup returns.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

from coverage_hub.clients.crypto_client import CryptoClient
from coverage_hub.clients.weather_client import WeatherClient
from coverage_hub.core.constants.enrichment import (
    API_TYPE_CRYPTO,
    API_TYPE_WEATHER,
    CRYPTO_ENDPOINT_ID,
    WEATHER_ENDPOINT_ID,
)
from coverage_hub.core.exceptions import EnrichmentUnavailable
from coverage_hub.db.api_call_store import ApiCallStore
from coverage_hub.schemas.enrichment import (
    Available,
    EnrichmentResult,
    LookupResult,
    Unavailable,
)
from coverage_hub.utils.background import spawn


class EnrichmentService:
    def __init__(
        self,
        weather_client: WeatherClient,
        crypto_client: CryptoClient,
        api_call_store: ApiCallStore,
    ) -> None:
        self._weather = weather_client
        self._crypto = crypto_client
        self._api_call_store = api_call_store
        self._logger = logging.getLogger("enrichment_service")

    async def lookup_weather(self, city: str, correlation_id: Optional[str] = None) -> LookupResult:
        self._logger.info("fetching weather data city=%s", city)
        try:
            payload = await self._weather.fetch_current_weather(city)
        except EnrichmentUnavailable as exc:
            self._logger.warning("weather lookup unavailable: %s", exc)
            return Unavailable(str(exc))

        self._record(API_TYPE_WEATHER, WEATHER_ENDPOINT_ID, {"city": city}, payload, correlation_id)
        return Available(payload)

    async def lookup_crypto(self, correlation_id: Optional[str] = None) -> LookupResult:
        self._logger.info("fetching crypto data")
        try:
            payload = await self._crypto.fetch_current_price()
        except EnrichmentUnavailable as exc:
            self._logger.warning("crypto lookup unavailable: %s", exc)
            return Unavailable(str(exc))

        self._record(API_TYPE_CRYPTO, CRYPTO_ENDPOINT_ID, {}, payload, correlation_id)
        return Available(payload)

    async def enrich(self, city: str, correlation_id: Optional[str] = None) -> EnrichmentResult:
        """Run both lookups concurrently; neither is required to succeed."""
        weather, crypto = await asyncio.gather(
            self.lookup_weather(city, correlation_id),
            self.lookup_crypto(correlation_id),
        )
        return EnrichmentResult(weather=weather, crypto=crypto)

    def _record(
        self,
        api_type: str,
        endpoint: str,
        request: Dict[str, Any],
        response: Dict[str, Any],
        correlation_id: Optional[str],
    ) -> None:
        spawn(
            self._api_call_store.insert_api_call(
                api_type=api_type,
                endpoint=endpoint,
                request=request,
                response=response,
                correlation_id=correlation_id,
            ),
            name=f"record-{api_type}-response",
        )
