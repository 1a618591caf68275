"""
Constants package — re-exports from domain-specific modules.

Usage:
    from coverage_hub.core.constants.coverage import LAKH
    # or import everything:
    from coverage_hub.core.constants import coverage, enrichment, persistence
"""

from coverage_hub.core.constants import coverage, enrichment, persistence
from coverage_hub.core.constants.coverage import (
    INCOME_MULTIPLE,
    LAKH,
    PREMIUM_RATE,
    CURRENCY_SYMBOL,
)
from coverage_hub.core.constants.enrichment import (
    API_TYPE_WEATHER,
    API_TYPE_CRYPTO,
    WEATHER_ENDPOINT_ID,
    CRYPTO_ENDPOINT_ID,
)
from coverage_hub.core.constants.persistence import (
    COVERAGE_REQUESTS_LIST_LIMIT,
    API_RESPONSES_LIST_LIMIT,
)

__all__ = [
    "coverage",
    "enrichment",
    "persistence",
    "INCOME_MULTIPLE",
    "LAKH",
    "PREMIUM_RATE",
    "CURRENCY_SYMBOL",
    "API_TYPE_WEATHER",
    "API_TYPE_CRYPTO",
    "WEATHER_ENDPOINT_ID",
    "CRYPTO_ENDPOINT_ID",
    "COVERAGE_REQUESTS_LIST_LIMIT",
    "API_RESPONSES_LIST_LIMIT",
]
