"""
Unit tests for BaseStore, CoverageRequestStore and ApiCallStore.

Tests cover:
- Rows are built with the right columns and sent to the right table
- Inserted row is returned as stored
- Recent listings order newest first with the configured limit
- Counts use an exact count query
- APIError / transport errors become PersistenceFailure
- Transport errors mark the connection handle disconnected
"""
import asyncio
import time

import pytest
from unittest.mock import MagicMock

import httpx
from postgrest.exceptions import APIError

from coverage_hub.core.exceptions import PersistenceFailure
from coverage_hub.db.api_call_store import ApiCallStore
from coverage_hub.db.base_store import BaseStore
from coverage_hub.db.coverage_request_store import CoverageRequestStore


@pytest.fixture
def mock_table(mock_supabase_client):
    return mock_supabase_client.client.table.return_value


# --------------------------------------------------------------------------
# BaseStore
# --------------------------------------------------------------------------

@pytest.mark.unit
class TestBaseStore:

    def test_client_property_delegates(self, mock_supabase_client):
        store = BaseStore(mock_supabase_client)
        assert store._client is mock_supabase_client.client

    @pytest.mark.asyncio
    async def test_insert_returns_stored_row(self, mock_supabase_client, mock_table):
        mock_table.execute.return_value = MagicMock(data=[{"id": 7, "name": "x"}])
        store = BaseStore(mock_supabase_client)

        saved = await store._insert("t", {"name": "x"})

        assert saved == {"id": 7, "name": "x"}
        mock_supabase_client.mark_connected.assert_called_once()

    @pytest.mark.asyncio
    async def test_insert_returns_input_when_no_data(self, mock_supabase_client):
        store = BaseStore(mock_supabase_client)
        saved = await store._insert("t", {"name": "x"})
        assert saved == {"name": "x"}

    @pytest.mark.asyncio
    async def test_api_error_becomes_persistence_failure(self, mock_supabase_client, mock_table):
        mock_table.execute.side_effect = APIError({"message": "relation does not exist", "code": "42P01"})
        store = BaseStore(mock_supabase_client)

        with pytest.raises(PersistenceFailure) as exc_info:
            await store._insert("missing_table", {"a": 1})

        assert "missing_table" in str(exc_info.value)
        mock_supabase_client.mark_disconnected.assert_not_called()

    @pytest.mark.asyncio
    async def test_transport_error_marks_disconnected(self, mock_supabase_client, mock_table):
        mock_table.execute.side_effect = httpx.ConnectError("connection refused")
        store = BaseStore(mock_supabase_client)

        with pytest.raises(PersistenceFailure):
            await store._select_recent("t", limit=5)

        mock_supabase_client.mark_disconnected.assert_called_once()

    @pytest.mark.asyncio
    async def test_select_recent_orders_newest_first(self, mock_supabase_client, mock_table):
        mock_table.execute.return_value = MagicMock(data=[{"id": 2}, {"id": 1}])
        store = BaseStore(mock_supabase_client)

        rows = await store._select_recent("t", limit=5)

        assert rows == [{"id": 2}, {"id": 1}]
        mock_table.order.assert_called_once_with("created_at", desc=True)
        mock_table.limit.assert_called_once_with(5)

    @pytest.mark.asyncio
    async def test_count_uses_exact_count(self, mock_supabase_client, mock_table):
        mock_table.execute.return_value = MagicMock(data=[{"id": 1}], count=12)
        store = BaseStore(mock_supabase_client)

        assert await store._count("t") == 12
        mock_table.select.assert_called_once_with("id", count="exact")

    @pytest.mark.asyncio
    async def test_count_none_is_zero(self, mock_supabase_client, mock_table):
        mock_table.execute.return_value = MagicMock(data=[], count=None)
        store = BaseStore(mock_supabase_client)
        assert await store._count("t") == 0

    @pytest.mark.asyncio
    async def test_slow_query_does_not_block_event_loop(self, mock_supabase_client, mock_table):
        def slow_execute():
            time.sleep(0.5)
            return MagicMock(data=[{"id": 1}])

        mock_table.execute.side_effect = slow_execute
        store = CoverageRequestStore(mock_supabase_client)

        insert = asyncio.ensure_future(store.insert_coverage_request(
            name="Asha", age=30, city="Mumbai", annual_income=600000, dependents=2,
            recommended_coverage=9_600_000, monthly_premium=86_400,
        ))

        started = time.perf_counter()
        await asyncio.sleep(0.01)
        lag = time.perf_counter() - started

        assert lag < 0.1
        assert (await insert)["id"] == 1


# --------------------------------------------------------------------------
# CoverageRequestStore
# --------------------------------------------------------------------------

@pytest.mark.unit
class TestCoverageRequestStore:

    @pytest.mark.asyncio
    async def test_insert_row_columns(self, mock_supabase_client, mock_table):
        store = CoverageRequestStore(mock_supabase_client)

        await store.insert_coverage_request(
            name="Asha", age=30, city="Mumbai", annual_income=600000, dependents=2,
            recommended_coverage=9_600_000, monthly_premium=86_400,
            weather_data={"main": {"temp": 30}}, crypto_data=None,
        )

        mock_supabase_client.client.table.assert_called_with("coverage_requests")
        row = mock_table.insert.call_args[0][0]
        assert row == {
            "name": "Asha",
            "age": 30,
            "city": "Mumbai",
            "annual_income": 600000,
            "dependents": 2,
            "recommended_coverage": 9_600_000,
            "monthly_premium": 86_400,
            "weather_data": {"main": {"temp": 30}},
            "crypto_data": None,
        }

    @pytest.mark.asyncio
    async def test_custom_table_name(self, mock_supabase_client):
        store = CoverageRequestStore(mock_supabase_client, table="leads")
        await store.count()
        mock_supabase_client.client.table.assert_called_with("leads")

    @pytest.mark.asyncio
    async def test_list_recent_default_limit_is_50(self, mock_supabase_client, mock_table):
        store = CoverageRequestStore(mock_supabase_client)
        await store.list_recent()
        mock_table.limit.assert_called_once_with(50)


# --------------------------------------------------------------------------
# ApiCallStore
# --------------------------------------------------------------------------

@pytest.mark.unit
class TestApiCallStore:

    @pytest.mark.asyncio
    async def test_insert_row_columns(self, mock_supabase_client, mock_table):
        store = ApiCallStore(mock_supabase_client)

        await store.insert_api_call(
            api_type="crypto",
            endpoint="api.coindesk.com/v1/bpi/currentprice.json",
            request={},
            response={"bpi": {}},
            correlation_id="req-1",
        )

        mock_supabase_client.client.table.assert_called_with("api_responses")
        row = mock_table.insert.call_args[0][0]
        assert set(row.keys()) == {"api_type", "endpoint", "request", "response", "correlation_id"}
        assert row["correlation_id"] == "req-1"

    @pytest.mark.asyncio
    async def test_list_recent_default_limit_is_100(self, mock_supabase_client, mock_table):
        store = ApiCallStore(mock_supabase_client)
        await store.list_recent()
        mock_table.limit.assert_called_once_with(100)

    @pytest.mark.asyncio
    async def test_unconfigured_handle_raises(self, unconfigured_settings):
        from coverage_hub.clients.supabase_client import SupabaseClient

        store = ApiCallStore(SupabaseClient(unconfigured_settings))
        with pytest.raises(PersistenceFailure):
            await store.insert_api_call("weather", "x", {}, {})
