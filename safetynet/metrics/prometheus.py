# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Imported by services and middleware. Never instantiated in controllers.
"""

from prometheus_client import Counter, Gauge, Histogram

# ── HTTP Metrics (used by middleware) ──
REQUEST_COUNT = Counter(
    "safetynet_requests_total",
    "Total HTTP requests to the alerts service",
    ["method", "endpoint", "status"],
)
REQUEST_LATENCY = Histogram(
    "safetynet_request_duration_seconds",
    "Request latency in seconds",
    ["method", "endpoint"],
)
HTTP_ERRORS = Counter(
    "safetynet_http_errors_total",
    "Total HTTP error responses",
    ["method", "endpoint", "status"],
)

# ── Business Metrics (updated by service layer only) ──
RESOLVER_QUERIES = Counter(
    "safetynet_resolver_queries_total",
    "Total resolver queries performed",
    ["operation"],
)
RESOLVER_ERRORS = Counter(
    "safetynet_resolver_errors_total",
    "Resolver queries that ended in a not-found error",
    ["operation"],
)
RESIDENTS_SKIPPED = Counter(
    "safetynet_residents_skipped_total",
    "Residents left out of a query result for lack of a medical record",
    ["operation"],
)
INDEX_REBUILDS = Counter(
    "safetynet_index_rebuilds_total",
    "Lookup index rebuilds after a store change",
)
RECORD_MUTATIONS = Counter(
    "safetynet_record_mutations_total",
    "Record store writes",
    ["entity", "action"],
)
RECORDS = Gauge(
    "safetynet_records",
    "Records currently held in memory",
    ["entity"],
)
