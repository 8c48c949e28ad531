"""
AINetBox Catalog API.

Read-only HTTP surface over the tool catalog:
- /api/*: Tool listings, search, lookups and paged browsing
- /healthz, /readyz: Health checks
- /metrics: Prometheus metrics
"""

__all__ = ["app"]
