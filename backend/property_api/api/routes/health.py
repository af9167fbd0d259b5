"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the configured storage is unreachable
      or the database pool was never initialized (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - Readiness goes through the repository so the in-memory backend is always ready
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from property_api.api.dependencies import get_readiness_repository
from property_api.core.repository_protocols import PropertyRepository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "property-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(
    repository: PropertyRepository | None = Depends(get_readiness_repository),
):
    """Readiness probe — includes storage connectivity."""
    storage_ok = (
        await repository.health_check() if repository is not None else False
    )
    if not storage_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
