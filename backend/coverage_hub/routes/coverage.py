"""
Coverage routes — form submission endpoint.

Provides:
- POST /api/calculate-coverage – validate, enrich, estimate, respond
"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from coverage_hub.container import get_coverage_service
from coverage_hub.core.exceptions import ValidationError
from coverage_hub.schemas.coverage import CalculateCoverageRequest, CalculateCoverageResponse
from coverage_hub.services.coverage_service import CoverageService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["coverage"])


@router.post("/calculate-coverage", response_model=CalculateCoverageResponse)
async def calculate_coverage(
    body: CalculateCoverageRequest = CalculateCoverageRequest(),
    service: CoverageService = Depends(get_coverage_service),
):
    try:
        result = await service.calculate(body)
    except ValidationError as exc:
        logger.info("validation failed: %s", exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except Exception as exc:
        logger.exception("coverage calculation error")
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "details": str(exc)},
        )

    return CalculateCoverageResponse(success=True, data=result)
