"""
API call store — raw third-party responses, one row per successful lookup.
"""

import logging
from typing import Any, Dict, List, Optional

from coverage_hub.clients.supabase_client import SupabaseClient
from coverage_hub.core.constants.persistence import API_RESPONSES_LIST_LIMIT
from coverage_hub.db.base_store import BaseStore

logger = logging.getLogger("api_call_store")


class ApiCallStore(BaseStore):
    """Insert and list rows of the api_responses table."""

    def __init__(self, supabase_client: SupabaseClient, table: str = "api_responses") -> None:
        super().__init__(supabase_client)
        self._table = table

    async def insert_api_call(
        self,
        api_type: str,
        endpoint: str,
        request: Dict[str, Any],
        response: Dict[str, Any],
        correlation_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        row = {
            "api_type": api_type,
            "endpoint": endpoint,
            "request": request,
            "response": response,
            "correlation_id": correlation_id,
        }
        saved = await self._insert(self._table, row)
        logger.info("%s API response saved id=%s", api_type, saved.get("id"))
        return saved

    async def list_recent(self, limit: int = API_RESPONSES_LIST_LIMIT) -> List[Dict[str, Any]]:
        return await self._select_recent(self._table, limit)

    async def count(self) -> int:
        return await self._count(self._table)
