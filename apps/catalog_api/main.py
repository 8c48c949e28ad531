"""
AINetBox Catalog FastAPI Application Entry Point.

This module initializes the FastAPI application with:
- CORS middleware
- OpenTelemetry instrumentation
- Rate limiting middleware
- Request ID injection
- Lifespan context management (tool store, DB, Redis connections)
- Router mounting
- Exception handlers mapping catalog errors to ``{"message": ...}`` bodies
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.catalog_api.middleware import RateLimitMiddleware, RequestIDMiddleware, RequestLoggingMiddleware
from apps.catalog_api.routers import catalog, health, metrics, tools
from netbox_catalog.exceptions import CatalogError
from netbox_config.settings import Settings
from netbox_obs.logging import get_logger, setup_logging
from netbox_obs.tracing import setup_tracing

# Initialize settings
settings = Settings()

# Setup logging
setup_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Handles:
    - Tool store selection (Postgres or in-memory sample data)
    - Redis connection initialization (optional)
    - Graceful shutdown of Redis and the database engine
    """
    from apps.catalog_api.deps import build_tool_store, close_redis, init_redis
    from netbox_store.database import close_db_connections

    logger.info(
        "catalog_api_starting",
        environment=settings.ENVIRONMENT,
        storage_backend=settings.STORAGE_BACKEND,
        database=settings.DATABASE_URL.split("@")[-1],
    )

    try:
        await init_redis()
        logger.info("redis_connected", url=settings.REDIS_URL)
    except Exception as e:
        logger.warning("redis_unavailable", error=str(e), rate_limiting="disabled")

    app.state.tool_store = build_tool_store(settings)

    yield

    logger.info("catalog_api_shutting_down")
    await close_redis()
    await close_db_connections()
    logger.info("catalog_api_shutdown_complete")


# Initialize FastAPI application
app = FastAPI(
    title="AINetBox Catalog API",
    description="Catalog of AI tools: browse, filter, search and sort",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Setup OpenTelemetry tracing
setup_tracing(settings, app)

# ============================================================================
# MIDDLEWARE
# ============================================================================

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins or ["*"],
    allow_credentials=settings.API_CORS_ALLOW_CREDENTIALS,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-Response-Time"],
)

# Starlette runs the last-added middleware first, so RequestID wraps the others
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(RateLimitMiddleware)
app.add_middleware(RequestIDMiddleware)

# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


@app.exception_handler(CatalogError)
async def catalog_exception_handler(request: Request, exc: CatalogError):
    """Map catalog errors to their status code; 5xx details stay in the logs."""
    if exc.status_code >= 500:
        logger.error("catalog_error", path=request.url.path, error=exc.message, exc_type=type(exc).__name__)
        return JSONResponse(status_code=exc.status_code, content={"message": "Failed to retrieve tools"})

    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed query/path parameters are a 400, like every other bad input."""
    problems = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part not in ('query', 'path'))}: {error['msg']}"
        for error in exc.errors()
    )
    return JSONResponse(status_code=400, content={"message": f"Invalid request parameters: {problems}"})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unhandled exceptions.

    The traceback is logged; the client only sees a generic message.
    """
    logger.exception("unhandled_exception", path=request.url.path, exc_type=type(exc).__name__)

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please contact support.",
        },
    )


# ============================================================================
# ROUTERS
# ============================================================================

# Catalog read endpoints
app.include_router(tools.router, prefix="/api", tags=["tools"])
app.include_router(catalog.router, prefix="/api", tags=["catalog"])

# Health and metrics
app.include_router(health.router, prefix="", tags=["health"])
app.include_router(metrics.router, prefix="", tags=["metrics"])


# ============================================================================
# ROOT ENDPOINT
# ============================================================================


@app.get("/", tags=["root"])
async def root():
    """
    Root endpoint - API information.

    Returns:
        API metadata and available endpoints
    """
    return {
        "name": "AINetBox Catalog API",
        "version": "0.1.0",
        "description": "Catalog of AI tools",
        "docs": "/docs",
        "health": "/healthz",
        "metrics": "/metrics",
        "endpoints": {
            "tools": "GET /api/tools",
            "search": "GET /api/tools/search?q=",
            "tool_detail": "GET /api/tools/{id}",
            "featured": "GET /api/featured-tools",
            "popular": "GET /api/popular-tools",
            "catalog": "GET /api/catalog",
            "categories": "GET /api/categories",
        },
    }


# ============================================================================
# DEVELOPMENT HELPERS
# ============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.catalog_api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.ENVIRONMENT == "development",
        log_level=settings.LOG_LEVEL.lower(),
    )
