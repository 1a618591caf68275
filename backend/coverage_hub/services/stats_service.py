"""
Stats service — store connection state, record counts and health summary.
"""
import logging
from datetime import datetime, timezone

from coverage_hub.clients.supabase_client import SupabaseClient
from coverage_hub.core.config import Settings
from coverage_hub.core.constants.persistence import STATE_CONNECTED, STATE_DISCONNECTED
from coverage_hub.db.api_call_store import ApiCallStore
from coverage_hub.db.coverage_request_store import CoverageRequestStore
from coverage_hub.schemas.health import EnvironmentCheck, HealthResponse
from coverage_hub.schemas.records import DatabaseStats, DbStats, StoreInfo

logger = logging.getLogger(__name__)


class StatsService:
    def __init__(
        self,
        supabase_client: SupabaseClient,
        coverage_store: CoverageRequestStore,
        api_call_store: ApiCallStore,
        settings: Settings,
    ) -> None:
        self._supabase_client = supabase_client
        self._coverage_store = coverage_store
        self._api_call_store = api_call_store
        self._settings = settings

    async def get_db_stats(self) -> DbStats:
        """Record counts plus connection state.

        An unconfigured store reports zero counts; a configured store that
        fails to answer raises PersistenceFailure.
        """
        if self._supabase_client.is_configured:
            coverage_count = await self._coverage_store.count()
            api_count = await self._api_call_store.count()
        else:
            coverage_count = api_count = 0

        state = self._supabase_client.state
        return DbStats(
            database=DatabaseStats(
                state=state,
                coverage_requests=coverage_count,
                api_responses=api_count,
            ),
            store=StoreInfo(
                url=self._supabase_client.masked_url,
                connected=state == STATE_CONNECTED,
            ),
        )

    def get_health(self) -> HealthResponse:
        """Liveness summary. Reports the last known store state without
        touching the network, so a down store never fails the probe."""
        return HealthResponse(
            status="OK",
            timestamp=datetime.now(timezone.utc).isoformat(),
            database=STATE_CONNECTED if self._supabase_client.is_connected else STATE_DISCONNECTED,
            environment=EnvironmentCheck(
                has_weather_key=self._settings.has_weather_key,
                has_database_url=self._settings.has_database_url,
            ),
        )
