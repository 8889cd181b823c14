"""
Prometheus-based metrics for production monitoring.
Provides /metrics endpoint for scraping.
"""
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import APIRouter, Response


# Counters
identity_verifications_total = Counter(
    "identity_verifications_total",
    "Bearer token verification attempts",
    ["policy", "outcome"],  # policy: required|optional; outcome: verified|missing|rejected|unavailable
)

paywall_access_total = Counter(
    "paywall_access_total",
    "Post detail access decisions",
    ["state"],  # anonymous, authenticated_non_subscriber, authenticated_subscriber
)

posts_created_total = Counter(
    "posts_created_total",
    "Total number of posts created",
)

subscription_toggles_total = Counter(
    "subscription_toggles_total",
    "Subscription toggles by resulting state",
    ["active"],
)

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "status"],
)

# Histograms
http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration",
    ["method"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5],
)


# Metrics endpoint router
router = APIRouter()


@router.get("/metrics")
def metrics_endpoint() -> Response:
    """Prometheus metrics endpoint for scraping."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )
