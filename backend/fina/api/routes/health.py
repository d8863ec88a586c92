"""Health Routes — liveness and database readiness for the Fina API.

Invariants:
    - GET /api/v1/health/ returns 200 while the process serves requests
    - GET /api/v1/health/ready returns 503 until init_db() has run and the
      database answers SELECT 1
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import fina.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness: the API process is up."""
    return {
        "status": "healthy",
        "service": "fina-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness: transactions and categories can be served."""
    manager = database.db_manager
    db_ok = await manager.health_check() if manager else False
    if not db_ok:
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
