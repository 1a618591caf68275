"""
Coverage request store — append-only log of form submissions.
"""

import logging
from typing import Any, Dict, List, Optional

from coverage_hub.clients.supabase_client import SupabaseClient
from coverage_hub.core.constants.persistence import COVERAGE_REQUESTS_LIST_LIMIT
from coverage_hub.db.base_store import BaseStore

logger = logging.getLogger("coverage_request_store")


class CoverageRequestStore(BaseStore):
    """Insert and list rows of the coverage_requests table."""

    def __init__(self, supabase_client: SupabaseClient, table: str = "coverage_requests") -> None:
        super().__init__(supabase_client)
        self._table = table

    async def insert_coverage_request(
        self,
        name: str,
        age: int,
        city: str,
        annual_income: int,
        dependents: int,
        recommended_coverage: int,
        monthly_premium: int,
        weather_data: Optional[Dict[str, Any]] = None,
        crypto_data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        row = {
            "name": name,
            "age": age,
            "city": city,
            "annual_income": annual_income,
            "dependents": dependents,
            "recommended_coverage": recommended_coverage,
            "monthly_premium": monthly_premium,
            "weather_data": weather_data,
            "crypto_data": crypto_data,
        }
        saved = await self._insert(self._table, row)
        logger.info(
            "coverage request saved id=%s coverage=%s",
            saved.get("id"), recommended_coverage,
        )
        return saved

    async def list_recent(self, limit: int = COVERAGE_REQUESTS_LIST_LIMIT) -> List[Dict[str, Any]]:
        return await self._select_recent(self._table, limit)

    async def count(self) -> int:
        return await self._count(self._table)
