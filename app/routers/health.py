# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# None of these touch the database.
# =============================================================================

import socket

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import SettingsDep

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class OSResponse(BaseModel):
    """Host and environment the process runs in."""
    os: str
    env: str


class StatusResponse(BaseModel):
    """Liveness / readiness response."""
    status: str


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/os", response_model=OSResponse)
async def os_info(settings: SettingsDep):
    """
    Report the host name and environment label.

    Useful for telling replicas apart behind a load balancer.
    """
    return OSResponse(os=socket.gethostname(), env=settings.ENVIRONMENT)


@router.get("/live", response_model=StatusResponse)
async def liveness_check():
    """
    Liveness check endpoint.

    Returns whether the service process is alive.
    Used by Kubernetes/Docker for restart decisions.
    """
    return StatusResponse(status="live")


@router.get("/ready", response_model=StatusResponse)
async def readiness_check():
    """
    Readiness check endpoint.

    Always reports ready; database connectivity is not checked here.
    """
    return StatusResponse(status="ready")
