"""
Enrichment schemas — lookup outcomes for the weather and crypto clients.

A lookup either produced a payload (Available) or did not (Unavailable).
Callers branch on the type instead of catching exceptions.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class Available:
    payload: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Unavailable:
    reason: str

    @property
    def ok(self) -> bool:
        return False


LookupResult = Union[Available, Unavailable]


def payload_or_none(result: LookupResult) -> Optional[Dict[str, Any]]:
    """Unwrap a lookup result into its payload, or None when unavailable."""
    if isinstance(result, Available):
        return result.payload
    return None


@dataclass(frozen=True)
class EnrichmentResult:
    """Both lookups for one coverage request."""
    weather: LookupResult
    crypto: LookupResult

    @property
    def weather_payload(self) -> Optional[Dict[str, Any]]:
        return payload_or_none(self.weather)

    @property
    def crypto_payload(self) -> Optional[Dict[str, Any]]:
        return payload_or_none(self.crypto)
