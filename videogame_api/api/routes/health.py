"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the game store is unreachable (readiness)
    - Both report the deployment environment; readiness also names the store backend

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
    - db_manager read through the module at call time: it is set by the lifespan,
      after this module is imported
    - Store backend reported by dialect name: the default in-memory SQLite store loses
      the catalog on restart, operators should see that at a glance
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from videogame_api.config import get_settings
from videogame_api.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "videogame-api",
        "version": "1.0.0",
        "environment": get_settings().environment,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: the game store must answer a query."""
    manager = database.db_manager
    environment = get_settings().environment
    if manager is None or not await manager.health_check():
        logger.warning("Readiness check failed: game store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "game_store_unavailable",
                "environment": environment,
            },
        )
    return {
        "status": "ready",
        "environment": environment,
        "checks": {
            "game_store": "healthy",
            "store_backend": manager.engine.dialect.name,
        },
    }
