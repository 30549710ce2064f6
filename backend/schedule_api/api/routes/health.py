"""Health & Readiness Probes — liveness text and store readiness endpoints.

Invariants:
    - GET / always returns 200 plain text if the process is up (liveness)
    - GET /health/ready returns 503 if the schedule store is unreachable (readiness)
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse)
async def health_check():
    """Basic liveness probe."""
    return "Server is up and running!"


@router.get("/health/ready")
async def readiness_check(request: Request):
    """Readiness probe — pings the schedule store."""
    store = getattr(request.app.state, "schedule_store", None)
    store_ok = await store.ping() if store is not None else False
    if not store_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "store_unavailable"},
        )
    return {"status": "ready", "checks": {"store": "healthy"}}
