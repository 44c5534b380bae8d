"""
Health Check Endpoints.

Provides liveness, readiness, and detailed health checks.

Endpoints:
- /health: Liveness check (process running)
- /health/ready: Readiness check (database reachable)
- /health/detailed: Component-by-component status (for debugging)
"""

import asyncio
import time
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tenantcrm.backend.core.config import get_app_config
from tenantcrm.backend.core.dependencies import DbSession
from tenantcrm.backend.core.logging import get_logger
from tenantcrm.backend.core.utils import utc_now

router = APIRouter()
logger = get_logger(__name__)


async def check_database(session: AsyncSession) -> dict[str, Any]:
    """
    Check database connectivity.

    Returns:
        Dict with status, latency, and optional error message
    """
    timeout = get_app_config().application.timeouts.database
    start = time.perf_counter()
    try:
        async with asyncio.timeout(timeout):
            await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        return {
            "status": "unhealthy",
            "error": str(e) or type(e).__name__,
        }

    return {
        "status": "healthy",
        "latency_ms": int((time.perf_counter() - start) * 1000),
    }


@router.get("/health")
async def health_check() -> dict[str, str]:
    """
    Liveness check.

    Returns 200 if the process is running.
    No dependency checks - this endpoint should always respond quickly.
    """
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(db: DbSession) -> Any:
    """
    Readiness check.

    Returns 200 if ready to serve traffic, 503 if the database is unreachable.
    """
    checks = {"database": await check_database(db)}
    body = {
        "status": "healthy",
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }

    if checks["database"]["status"] != "healthy":
        logger.warning("Readiness check failed", extra={"checks": checks})
        body["status"] = "unhealthy"
        return JSONResponse(status_code=503, content=body)

    return body


@router.get("/health/detailed")
async def detailed_health_check(db: DbSession) -> dict[str, Any]:
    """
    Detailed health check.

    Returns dependency checks plus application and database settings.
    """
    app_config = get_app_config()
    app_settings = app_config.application
    checks = {"database": await check_database(db)}

    return {
        "status": "healthy" if checks["database"]["status"] == "healthy" else "unhealthy",
        "application": {
            "name": app_settings.name,
            "env": app_settings.environment,
            "debug": app_settings.debug,
            "version": app_settings.version,
        },
        "database": {"driver": app_config.database.driver},
        "tenancy": {"default_tenant": app_config.tenancy.default_tenant},
        "checks": checks,
        "timestamp": utc_now().isoformat(),
    }
