"""
Record routes — monitoring views over the persisted data.

Provides:
- GET /api/coverage-requests – newest 50 coverage requests
- GET /api/api-responses     – newest 100 third-party responses
- GET /api/db-stats          – store state and record counts
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from coverage_hub.container import (
    get_api_call_store,
    get_coverage_request_store,
    get_stats_service,
)
from coverage_hub.db.api_call_store import ApiCallStore
from coverage_hub.db.coverage_request_store import CoverageRequestStore
from coverage_hub.schemas.records import (
    ApiCallListResponse,
    ApiCallRecord,
    CoverageRequestListResponse,
    CoverageRequestRecord,
    DbStatsResponse,
)
from coverage_hub.services.stats_service import StatsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["records"])


@router.get("/coverage-requests", response_model=CoverageRequestListResponse)
async def list_coverage_requests(
    store: CoverageRequestStore = Depends(get_coverage_request_store),
):
    try:
        rows = await store.list_recent()
        records = [CoverageRequestRecord(**row) for row in rows]
    except Exception as e:
        logger.error("Failed to fetch coverage requests: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch requests"})

    logger.info("found %d coverage requests", len(records))
    return CoverageRequestListResponse(data=records, count=len(records))


@router.get("/api-responses", response_model=ApiCallListResponse)
async def list_api_responses(
    store: ApiCallStore = Depends(get_api_call_store),
):
    try:
        rows = await store.list_recent()
        records = [ApiCallRecord(**row) for row in rows]
    except Exception as e:
        logger.error("Failed to fetch API responses: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch API responses"})

    logger.info("found %d API responses", len(records))
    return ApiCallListResponse(data=records, count=len(records))


@router.get("/db-stats", response_model=DbStatsResponse)
async def get_db_stats(
    stats_service: StatsService = Depends(get_stats_service),
):
    try:
        stats = await stats_service.get_db_stats()
    except Exception as e:
        logger.error("Failed to get database stats: %s", e)
        return JSONResponse(status_code=500, content={"error": "Failed to get database stats"})

    return DbStatsResponse(stats=stats)
