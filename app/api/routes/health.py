import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.db.base import get_session_factory

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(request: Request):
    """Liveness check for the load balancer.

    Returns 503 during graceful shutdown so traffic drains away.
    """
    if getattr(request.app.state, "shutting_down", False):
        return JSONResponse(
            status_code=503,
            content={"status": "shutting_down", "service": "baby-journey"},
        )
    return {"status": "healthy", "service": "baby-journey"}


@router.get("/ready")
async def readiness_check():
    """Readiness check: the record store answers a trivial query."""
    checks = {"database": False}

    try:
        async with get_session_factory()() as session:
            await session.execute(text("SELECT 1"))
        checks["database"] = True
    except (SQLAlchemyError, RuntimeError, OSError) as e:
        logger.error("readiness_database_failed", error=str(e), error_type=type(e).__name__)

    all_healthy = all(checks.values())
    return JSONResponse(
        status_code=200 if all_healthy else 503,
        content={"status": "ready" if all_healthy else "degraded", "checks": checks},
    )
