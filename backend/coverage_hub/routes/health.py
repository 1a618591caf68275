"""
Health routes — liveness probe.

Reports store connectivity and which secrets are configured, never their
values.
"""
from fastapi import APIRouter, Depends

from coverage_hub.container import get_stats_service
from coverage_hub.schemas.health import HealthResponse
from coverage_hub.services.stats_service import StatsService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(stats_service: StatsService = Depends(get_stats_service)):
    """Basic health check endpoint."""
    return stats_service.get_health()
