"""
Route aggregator — coverage and record routes live under /api, health at root.
"""
from coverage_hub.routes.coverage import router as coverage_router
from coverage_hub.routes.records import router as records_router
from coverage_hub.routes.health import router as health_router

__all__ = ["coverage_router", "records_router", "health_router"]
