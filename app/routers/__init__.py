# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - docs.py: Root HTML page and OpenAPI description file
# - health.py: Host info, liveness and readiness endpoints
# - planets.py: Planet lookup endpoint
#
# Each router is mounted in main.py.
# =============================================================================

from . import docs
from . import health
from . import planets

__all__ = [
    "docs",
    "health",
    "planets",
]
