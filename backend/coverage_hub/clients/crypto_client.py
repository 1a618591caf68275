"""
CoinDesk HTTP client — current Bitcoin price index.
"""
from typing import Any, Dict

import httpx

from coverage_hub.core.config import Settings
from coverage_hub.core.exceptions import EnrichmentUnavailable


class CryptoClient:
    def __init__(self, settings: Settings) -> None:
        self._url = settings.crypto_api_url

    async def fetch_current_price(self) -> Dict[str, Any]:
        """Return the raw CoinDesk currentprice payload (no parameters)."""
        try:
            async with httpx.AsyncClient() as client:
                resp = await client.get(self._url)
        except httpx.HTTPError as exc:
            raise EnrichmentUnavailable("crypto", f"{type(exc).__name__}: {exc}") from exc

        if not resp.is_success:
            raise EnrichmentUnavailable(
                "crypto", f"HTTP {resp.status_code}", status_code=resp.status_code
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise EnrichmentUnavailable("crypto", "response is not JSON") from exc
        if not isinstance(body, dict):
            raise EnrichmentUnavailable("crypto", "response is not a JSON object")
        return body
