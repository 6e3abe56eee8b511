"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe; does not check dependencies."""
    return {"status": "healthy", "service": "catalog"}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check over the database and Redis.

    Returns 200 when the database answers and 503 otherwise. Redis is
    reported but never fails readiness since the catalog works without
    its cache.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    checks: dict[str, Any] = {}
    all_healthy = True

    db_healthy = app_deps.database_service.health_check()
    checks["database"] = {
        "status": "healthy" if db_healthy else "unhealthy",
        "type": "postgresql" if "postgresql" in config.database.url else "sqlite",
    }
    if not db_healthy:
        all_healthy = False

    if app_deps.redis_service.is_enabled:
        redis_healthy = await app_deps.redis_service.health_check()
        checks["redis"] = {"status": "healthy" if redis_healthy else "degraded"}
    else:
        checks["redis"] = {"status": "disabled", "note": "Product cache is bypassed"}

    response = {
        "status": "ready" if all_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": checks,
    }

    if not all_healthy:
        return JSONResponse(status_code=503, content=response)

    return response
