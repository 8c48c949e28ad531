"""
Health Check Endpoints.

- GET /healthz: Liveness probe (API running)
- GET /readyz: Readiness probe (tool store reachable)
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from apps.catalog_api.deps import get_redis_client, get_tool_store
from netbox_catalog.exceptions import StoreUnavailableError
from netbox_obs.logging import get_logger
from netbox_store.stores import ToolStore

router = APIRouter()
logger = get_logger(__name__)


@router.get("/healthz")
async def healthz():
    """
    Liveness probe - is the API process running?

    Returns 200 OK if server is alive.
    """
    return {"status": "healthy", "service": "ainetbox-catalog"}


@router.get("/readyz")
async def readyz(store: ToolStore = Depends(get_tool_store)):
    """
    Readiness probe - is the API ready to serve traffic?

    Checks:
    - Tool store (database query or in-memory store)
    - Redis (informational only; rate limiting fails open)

    Returns:
        200 OK if the tool store answers
        503 Service Unavailable otherwise
    """
    checks = {"database": "ok", "redis": "ok" if get_redis_client() else "disabled"}

    try:
        if not await store.ping():
            checks["database"] = "failed"
    except StoreUnavailableError as e:
        logger.warning("readiness_check_failed", error=e.message)
        checks["database"] = "failed"

    if checks["database"] != "ok":
        return JSONResponse(status_code=503, content={"status": "unhealthy", "checks": checks})

    return {"status": "ready", "checks": checks}
