"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the store was never initialized (readiness)
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from taskboard.api.routes.fallback import READ_METHODS
from taskboard.infrastructure import memory_store

router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_VERSION = "1.0.0"


@router.api_route("", methods=READ_METHODS, status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "taskboard-api",
        "version": SERVICE_VERSION,
    }


@router.api_route("/ready", methods=READ_METHODS)
async def readiness_check():
    """Readiness probe — includes store record counts."""
    manager = memory_store.store_manager
    if manager is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "store_uninitialized",
            },
        )
    return {"status": "ready", "checks": {"store": manager.health_check()}}
