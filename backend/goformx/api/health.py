"""Health check endpoint."""

import time
from fastapi import APIRouter

from goformx.config import get_settings
from goformx.models.responses import HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness check; the validation core has no external dependencies."""
    return HealthResponse(
        status="healthy",
        version=get_settings().VERSION,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
