"""
Base store — shared Supabase access for the coverage and API-call stores.

All domain-specific stores inherit from this class to get standardised
insert / recent-select / count primitives. Every failure is raised as
PersistenceFailure; callers decide whether to swallow it.

The supabase client is synchronous, so each query runs in a worker thread
via asyncio.to_thread and a slow store never stalls the event loop.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List

import httpx
from postgrest.exceptions import APIError

from coverage_hub.clients.supabase_client import SupabaseClient
from coverage_hub.core.exceptions import PersistenceFailure

logger = logging.getLogger("base_store")


class BaseStore:
    """Base class for all Supabase stores."""

    def __init__(self, supabase_client: SupabaseClient) -> None:
        self._supabase_client = supabase_client

    @property
    def _client(self):
        """Get the Supabase client instance."""
        return self._supabase_client.client

    def _failed(self, operation: str, table: str, error: Exception) -> PersistenceFailure:
        logger.info("supabase error table=%s detail=%s", table, str(error))
        if isinstance(error, httpx.HTTPError):
            self._supabase_client.mark_disconnected(error)
        return PersistenceFailure(f"Supabase {operation} {table}", str(error))

    async def _execute(self, operation: str, table: str, build_query: Callable[[Any], Any]):
        """Build and execute a query off the event loop."""
        def _run():
            return build_query(self._client.table(table)).execute()

        try:
            response = await asyncio.to_thread(_run)
        except (APIError, httpx.HTTPError) as e:
            raise self._failed(operation, table, e) from e
        self._supabase_client.mark_connected()
        return response

    async def _insert(self, table: str, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored (with id and created_at)."""
        response = await self._execute("insert into", table, lambda q: q.insert(row))
        return response.data[0] if response.data else row

    async def _select_recent(
        self, table: str, limit: int, order_by: str = "created_at"
    ) -> List[Dict[str, Any]]:
        """Select the newest rows of a table."""
        response = await self._execute(
            "select from",
            table,
            lambda q: q.select("*").order(order_by, desc=True).limit(limit),
        )
        return response.data or []

    async def _count(self, table: str) -> int:
        """Count every row of a table."""
        response = await self._execute(
            "count", table, lambda q: q.select("id", count="exact").limit(1)
        )
        return response.count or 0
