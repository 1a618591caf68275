import asyncio
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from coverage_hub.container import get_supabase_client
from coverage_hub.core.config import settings
from coverage_hub.core.middleware import apply_cors
from coverage_hub.routes import coverage_router, health_router, records_router
from coverage_hub.utils.background import drain, pending_count
from coverage_hub.utils.formatting import mask_url

logger = logging.getLogger(__name__)


def _log_environment_check() -> None:
    """Log which settings are present, never their values."""
    logger.info("Environment check:")
    logger.info(
        "  - Supabase URL: %s",
        f"set ({mask_url(settings.supabase_url)})" if settings.has_database_url else "MISSING",
    )
    logger.info(
        "  - Supabase key: %s",
        "set" if settings.supabase_service_role_key else "MISSING",
    )
    logger.info(
        "  - Weather API key: %s",
        "set" if settings.has_weather_key else "MISSING (weather lookups will be skipped)",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler.

    On startup:
    - Log the environment check
    - Ping the store so /health and /api/db-stats start with a real state

    On shutdown:
    - Wait for pending fire-and-forget writes
    """
    logger.info("=== Coverage Hub Starting ===")
    _log_environment_check()

    supabase_client = get_supabase_client()
    if await asyncio.to_thread(supabase_client.ping):
        logger.info("Store connected: %s", supabase_client.masked_url)
    else:
        logger.warning("Store unavailable (state=%s); requests will still be served", supabase_client.state)

    logger.info("=== Coverage Hub Ready ===")

    yield

    logger.info("=== Coverage Hub Shutting Down ===")
    if pending_count():
        logger.info("Waiting for %d pending writes", pending_count())
    await drain()
    logger.info("Shutdown complete")


app = FastAPI(title="Coverage Hub Backend", lifespan=lifespan)
logging.basicConfig(level=settings.log_level, format="%(levelname)s:%(name)s:%(message)s")

apply_cors(app)

app.include_router(coverage_router)
app.include_router(records_router)
app.include_router(health_router)


def run() -> None:
    uvicorn.run("coverage_hub.main:app", host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
