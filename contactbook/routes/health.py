"""
Contactbook — Health Check Route
=================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Asks the configured contact repository whether its storage is reachable.

Status levels:
    - healthy:   repository reachable (HTTP 200)
    - unhealthy: repository unreachable (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from contactbook import __version__
from contactbook.schemas.contact import HealthResponse
from contactbook.services.contact_service import ContactService, get_contact_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Repository unreachable", "model": HealthResponse}},
)
async def health_check(service: ContactService = Depends(get_contact_service)):
    repository_status = "available"
    overall = "healthy"

    try:
        if not await service.repository.health_check():
            repository_status = "unavailable"
            overall = "unhealthy"
    except Exception as e:
        repository_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: repository probe failed: %s", str(e))

    body = HealthResponse(
        status=overall,
        version=__version__,
        repository=repository_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(
        status_code=200 if overall == "healthy" else 503,
        content=body.model_dump(),
    )
