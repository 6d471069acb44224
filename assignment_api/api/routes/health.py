"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if process is up
    - No readiness probe: the service has no backing store to check
"""

import logging
from fastapi import APIRouter, status

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "assignment-api",
        "version": "1.0.0",
    }
