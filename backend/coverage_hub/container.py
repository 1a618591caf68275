"""
Lazy DI container — singleton access to clients, stores, and services.

The Supabase connection handle is created here once and passed explicitly to
every store; nothing else reaches for a process-wide client. Routes depend on
the getters below through FastAPI's Depends, so tests swap them with
app.dependency_overrides.
"""

from functools import lru_cache

from coverage_hub.core.config import settings
from coverage_hub.clients.supabase_client import SupabaseClient
from coverage_hub.clients.weather_client import WeatherClient
from coverage_hub.clients.crypto_client import CryptoClient
from coverage_hub.db.coverage_request_store import CoverageRequestStore
from coverage_hub.db.api_call_store import ApiCallStore
from coverage_hub.services.enrichment_service import EnrichmentService
from coverage_hub.services.coverage_service import CoverageService
from coverage_hub.services.stats_service import StatsService


# -- Clients ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_supabase_client():
    return SupabaseClient(settings)


@lru_cache(maxsize=1)
def get_weather_client():
    return WeatherClient(settings)


@lru_cache(maxsize=1)
def get_crypto_client():
    return CryptoClient(settings)


# -- DB Stores -------------------------------------------------------------

@lru_cache(maxsize=1)
def get_coverage_request_store():
    return CoverageRequestStore(get_supabase_client(), table=settings.coverage_requests_table)


@lru_cache(maxsize=1)
def get_api_call_store():
    return ApiCallStore(get_supabase_client(), table=settings.api_responses_table)


# -- Services --------------------------------------------------------------

@lru_cache(maxsize=1)
def get_enrichment_service():
    return EnrichmentService(
        weather_client=get_weather_client(),
        crypto_client=get_crypto_client(),
        api_call_store=get_api_call_store(),
    )


@lru_cache(maxsize=1)
def get_coverage_service():
    return CoverageService(
        enrichment=get_enrichment_service(),
        coverage_store=get_coverage_request_store(),
    )


@lru_cache(maxsize=1)
def get_stats_service():
    return StatsService(
        supabase_client=get_supabase_client(),
        coverage_store=get_coverage_request_store(),
        api_call_store=get_api_call_store(),
        settings=settings,
    )
