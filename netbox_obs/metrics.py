"""
Prometheus Metrics Registration.

Custom metrics for the catalog API and tool store.
"""

from prometheus_client import Counter, Histogram

# ============================================================================
# COUNTERS
# ============================================================================

catalog_requests_total = Counter(
    "catalog_requests_total",
    "Catalog API requests",
    ["endpoint", "status"],  # status: HTTP status code
)

tool_store_errors_total = Counter(
    "tool_store_errors_total",
    "Tool store failures (storage unavailable)",
    ["operation"],
)

# ============================================================================
# HISTOGRAMS
# ============================================================================

catalog_query_duration = Histogram(
    "catalog_query_duration_seconds",
    "Time spent serving a catalog endpoint",
    ["endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

catalog_results_size = Histogram(
    "catalog_results_size",
    "Number of tools returned per list request",
    ["endpoint"],
    buckets=(0, 1, 3, 6, 12, 25, 50, 100),
)
