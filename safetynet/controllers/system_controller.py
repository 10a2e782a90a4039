# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from safetynet.core.config import settings
from safetynet.core.dependencies import get_data_file_repo, get_record_store

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Liveness probe for Docker and orchestration."""
    snapshot = get_record_store().snapshot()
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "data_version": snapshot.version,
        "records": snapshot.counts(),
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness probe — verifies records are loaded."""
    store = get_record_store()
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "data_file": str(get_data_file_repo().path),
        "records_loaded": store.count() > 0,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
