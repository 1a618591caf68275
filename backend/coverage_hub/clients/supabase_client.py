import logging
from typing import Any

from supabase import create_client, Client

from coverage_hub.core.config import Settings
from coverage_hub.core.constants.persistence import (
    STATE_CONNECTED,
    STATE_CONNECTING,
    STATE_DISCONNECTED,
    STATE_UNCONFIGURED,
)
from coverage_hub.core.exceptions import PersistenceFailure
from coverage_hub.utils.formatting import mask_url

logger = logging.getLogger("supabase_client")


class SupabaseClient:
    """Connection handle for the coverage store.

    Owned by the container and injected into every store. Unlike a
    module-level client it tolerates missing configuration: construction never
    raises, and the first real use reports a PersistenceFailure instead.
    """

    def __init__(self, settings: Settings) -> None:
        self._url = settings.supabase_url
        self._key = settings.supabase_service_role_key
        self._probe_table = settings.coverage_requests_table
        self._client: Client | None = None
        self._state = STATE_DISCONNECTED if self.is_configured else STATE_UNCONFIGURED

    @property
    def is_configured(self) -> bool:
        return bool(self._url and self._key)

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state == STATE_CONNECTED

    @property
    def masked_url(self) -> str | None:
        return mask_url(self._url)

    def get_client(self) -> Client:
        """Get or create the Supabase client instance."""
        if not self.is_configured:
            raise PersistenceFailure(
                "connect",
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set for Supabase access",
            )
        if self._client is None:
            self._state = STATE_CONNECTING
            try:
                self._client = create_client(self._url, self._key)
            except Exception as e:
                self._state = STATE_DISCONNECTED
                logger.error("supabase client init failed url=%s error=%s", self.masked_url, e)
                raise PersistenceFailure("connect", str(e)) from e
            self._state = STATE_CONNECTED
            logger.info("supabase client initialized url=%s", self.masked_url)
        return self._client

    @property
    def client(self) -> Client:
        """Property accessor for the Supabase client."""
        return self.get_client()

    def mark_connected(self) -> None:
        if self._state != STATE_CONNECTED:
            logger.info("supabase connection restored url=%s", self.masked_url)
        self._state = STATE_CONNECTED

    def mark_disconnected(self, error: Any) -> None:
        if self._state == STATE_CONNECTED:
            logger.warning("supabase connection lost url=%s error=%s", self.masked_url, error)
        if self.is_configured:
            self._state = STATE_DISCONNECTED

    def ping(self) -> bool:
        """Run a one-row query to confirm the store is reachable."""
        if not self.is_configured:
            logger.warning("supabase ping skipped: store not configured")
            return False
        try:
            self.client.table(self._probe_table).select("id").limit(1).execute()
        except Exception as e:
            self.mark_disconnected(e)
            logger.error("supabase ping failed url=%s error=%s", self.masked_url, e)
            return False
        self.mark_connected()
        return True
