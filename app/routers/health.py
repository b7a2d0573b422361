# =============================================================================
# app/routers/health.py - Health Check Endpoint
# =============================================================================
# Liveness check for monitoring and load balancers.
# Does not touch MongoDB or Cloudinary: a 200 means the process is up,
# not that its dependencies are.
# =============================================================================

import time
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app import PROCESS_STARTED_AT
from app.dependencies import SettingsDep

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Liveness response."""
    status: str
    timestamp: str
    uptime: float
    environment: str


# =============================================================================
# Endpoints
# =============================================================================

def process_uptime() -> float:
    """Seconds since the process started."""
    return max(0.0, time.monotonic() - PROCESS_STARTED_AT)


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep):
    """
    Health check endpoint.

    Always returns 200 while the process is alive.
    """
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        uptime=process_uptime(),
        environment=settings.NODE_ENV,
    )
