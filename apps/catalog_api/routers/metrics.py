"""
Prometheus Metrics Endpoint.

Exposes /metrics for Prometheus scraping.
"""

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter()


@router.get("/metrics")
async def metrics():
    """
    Prometheus metrics endpoint.

    Example metrics:
    ```
    # HELP catalog_requests_total Catalog API requests
    # TYPE catalog_requests_total counter
    catalog_requests_total{endpoint="search",status="200"} 42
    ```
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
