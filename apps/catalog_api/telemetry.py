"""
Per-endpoint request telemetry.

Wraps a route body to record ``catalog_requests_total`` and
``catalog_query_duration_seconds`` and to turn storage failures into the
endpoint's generic 500 message.
"""

import time
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from netbox_catalog.exceptions import CatalogError, StoreUnavailableError
from netbox_obs.logging import get_logger
from netbox_obs.metrics import catalog_query_duration, catalog_requests_total, catalog_results_size

logger = get_logger(__name__)


@contextmanager
def observe_endpoint(endpoint: str, failure_message: str = "Failed to retrieve tools") -> Iterator[None]:
    """
    Record metrics for one endpoint call.

    Example:
        with observe_endpoint("featured_tools", "Failed to retrieve featured tools"):
            tools = await store.get_featured()

    Raises:
        HTTPException: 500 with ``failure_message`` when the store is unavailable
    """
    start = time.perf_counter()
    status_code = 200
    try:
        yield
    except StoreUnavailableError as exc:
        status_code = 500
        logger.error("catalog_endpoint_failed", endpoint=endpoint, error=exc.message)
        raise HTTPException(500, failure_message) from exc
    except CatalogError as exc:
        status_code = exc.status_code
        raise
    except HTTPException as exc:
        status_code = exc.status_code
        raise
    except Exception:
        status_code = 500
        raise
    finally:
        catalog_requests_total.labels(endpoint=endpoint, status=str(status_code)).inc()
        catalog_query_duration.labels(endpoint=endpoint).observe(time.perf_counter() - start)


def record_results(endpoint: str, count: int) -> None:
    catalog_results_size.labels(endpoint=endpoint).observe(count)
