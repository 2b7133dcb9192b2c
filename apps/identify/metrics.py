"""Identify 서비스 Prometheus 메트릭"""

from fastapi import FastAPI
from fastapi.responses import Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

REGISTRY = CollectorRegistry(auto_describe=True)
METRICS_PATH = "/metrics/status"


def register_metrics(app: FastAPI) -> None:
    """Prometheus /metrics 엔드포인트 등록"""

    @app.get(METRICS_PATH, include_in_schema=False)
    async def metrics_endpoint() -> Response:
        return Response(content=generate_latest(REGISTRY), media_type=CONTENT_TYPE_LATEST)


# ─────────────────────────────────────────────────────────────────────────────
# 식별 Resolver 메트릭
# ─────────────────────────────────────────────────────────────────────────────

BACKEND_ATTEMPT_LATENCY = Histogram(
    "identify_backend_attempt_duration_seconds",
    "Duration of a single identification backend attempt",
    labelnames=["backend"],
    registry=REGISTRY,
    buckets=(0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0),
)

BACKEND_ATTEMPT_COUNTER = Counter(
    "identify_backend_attempt_total",
    "Total count of identification backend attempts",
    labelnames=["backend", "outcome"],  # success, network, protocol, malformed, low_confidence
    registry=REGISTRY,
)

RESOLVED_RESULT_COUNTER = Counter(
    "identify_resolved_total",
    "Total count of resolved identifications",
    labelnames=["request_kind", "source"],  # source: local_model, remote_ai, degraded
    registry=REGISTRY,
)

STATS_RECORD_COUNTER = Counter(
    "identify_stats_record_total",
    "Total count of scan history record attempts",
    labelnames=["status"],  # success, failed
    registry=REGISTRY,
)
