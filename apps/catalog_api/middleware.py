"""
Custom FastAPI Middleware.

Implements:
- Request ID injection
- Rate limiting per visitor (Redis sliding window)
- Request/response logging
"""

import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from redis.exceptions import RedisError
from starlette.middleware.base import BaseHTTPMiddleware

from apps.catalog_api.auth import identity_from_headers
from netbox_config.settings import Settings
from netbox_obs.logging import get_logger

settings = Settings()
logger = get_logger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Inject unique request ID into each request.

    Adds X-Request-ID header to response and binds it to the structlog
    context so every log line of the request carries it.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rate limiting middleware using Redis sliding window.

    Signed-in visitors (identity header present) are keyed by user id,
    everyone else by client IP. Health checks and metrics are exempt.
    When Redis is missing or failing, requests pass through (fail open).
    """

    def __init__(self, app, redis_getter: Callable | None = None):
        super().__init__(app)
        self.redis_getter = redis_getter
        self.exempted_paths = {"/healthz", "/readyz", "/metrics"}

    def _get_redis(self):
        if self.redis_getter is not None:
            return self.redis_getter()
        from apps.catalog_api.deps import get_redis_client

        return get_redis_client()

    @staticmethod
    def rate_limit_key(request: Request) -> tuple[str, int]:
        """Return ``(redis_key, limit)`` for the caller."""
        identity = identity_from_headers(request)
        if identity:
            return f"rate_limit:user:{identity.user_id}", settings.RATE_LIMIT_PER_USER

        client_ip = request.client.host if request.client else "unknown"
        return f"rate_limit:ip:{client_ip}", settings.RATE_LIMIT_ANONYMOUS

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if not settings.RATE_LIMIT_ENABLED or request.url.path in self.exempted_paths:
            return await call_next(request)

        redis = self._get_redis()
        if not redis:
            logger.debug("rate_limit_skipped", reason="redis_unavailable")
            return await call_next(request)

        key, limit = self.rate_limit_key(request)
        now = time.time()
        window = settings.REDIS_RATE_LIMIT_WINDOW

        try:
            await redis.zremrangebyscore(key, 0, now - window)
            current_count = await redis.zcard(key)

            if current_count >= limit:
                oldest = await redis.zrange(key, 0, 0, withscores=True)
                if oldest:
                    retry_after = int(window - (now - oldest[0][1])) + 1
                else:
                    retry_after = window

                logger.warning("rate_limit_exceeded", key=key, limit=limit)
                response = Response(
                    content='{"message": "Too many requests"}',
                    status_code=429,
                    media_type="application/json",
                )
                response.headers["Retry-After"] = str(retry_after)
                response.headers["X-RateLimit-Limit"] = str(limit)
                response.headers["X-RateLimit-Remaining"] = "0"
                response.headers["X-RateLimit-Reset"] = str(int(now + retry_after))
                return response

            await redis.zadd(key, {str(uuid.uuid4()): now})
            await redis.expire(key, window + 10)
        except (RedisError, OSError) as e:
            logger.error("rate_limit_error", error=str(e))
            return await call_next(request)

        response = await call_next(request)

        remaining = max(0, limit - current_count - 1)
        response.headers["X-RateLimit-Limit"] = str(limit)
        response.headers["X-RateLimit-Remaining"] = str(remaining)
        response.headers["X-RateLimit-Reset"] = str(int(now + window))
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log all incoming requests and responses.

    Includes method, path, query string, response status and duration.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        request_id = getattr(request.state, "request_id", "unknown")

        logger.info(
            "http_request_start",
            method=request.method,
            path=request.url.path,
            query=str(request.url.query),
            request_id=request_id,
        )

        response = await call_next(request)

        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "http_request_complete",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
            request_id=request_id,
        )
        response.headers["X-Response-Time"] = f"{duration_ms}ms"

        return response
