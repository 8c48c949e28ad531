"""
FastAPI Routers.

Contains:
- tools: GET /api/tools, /api/tools/search, /api/tools/{id}, /api/featured-tools, /api/popular-tools
- catalog: GET /api/catalog, /api/categories
- health: GET /healthz, /readyz
- metrics: GET /metrics
"""

__all__ = ["tools", "catalog", "health", "metrics"]
