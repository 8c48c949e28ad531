"""
FastAPI Dependency Injection.

Provides dependency injection for:
- The tool store (Postgres or in-memory, chosen at startup)
- Redis connections (rate limiting)
- Application settings
"""

from fastapi import Request
from redis.asyncio import Redis

from netbox_catalog.exceptions import StoreUnavailableError
from netbox_config.settings import Settings
from netbox_obs.logging import get_logger
from netbox_store.database import get_session_factory
from netbox_store.stores import MemoryToolStore, PostgresToolStore, ToolStore

# Initialize settings
settings = Settings()
logger = get_logger(__name__)


# ============================================================================
# STORE DEPENDENCIES
# ============================================================================


def build_tool_store(settings: Settings) -> ToolStore:
    """Create the tool store selected by ``STORAGE_BACKEND``."""
    if settings.STORAGE_BACKEND == "memory":
        logger.info("tool_store_selected", backend="memory")
        return MemoryToolStore.with_sample_tools()

    logger.info("tool_store_selected", backend="postgres")
    return PostgresToolStore(get_session_factory(settings.DATABASE_URL))


def get_tool_store(request: Request) -> ToolStore:
    """
    Dependency: Tool store created during application startup.

    Example Usage:
        @router.get("/tools")
        async def list_tools(store: ToolStore = Depends(get_tool_store)):
            return await store.get_all()
    """
    store = getattr(request.app.state, "tool_store", None)
    if store is None:
        raise StoreUnavailableError("Tool store not initialized")
    return store


# ============================================================================
# REDIS DEPENDENCIES
# ============================================================================


_redis_client: Redis | None = None


async def init_redis() -> None:
    """Initialize Redis connection pool and verify it answers."""
    global _redis_client
    client = Redis.from_url(settings.REDIS_URL, decode_responses=True)
    try:
        await client.ping()
    except Exception:
        await client.aclose()
        raise
    _redis_client = client


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis_client
    if _redis_client:
        await _redis_client.aclose()
        _redis_client = None


def get_redis_client() -> Redis | None:
    """Get Redis client (for use in middleware)."""
    return _redis_client


# ============================================================================
# SETTINGS DEPENDENCY
# ============================================================================


def get_settings() -> Settings:
    """
    Dependency: Application settings.

    Returns:
        Settings: Pydantic settings instance
    """
    return settings
