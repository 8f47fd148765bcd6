# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .planet_service import PlanetRepository
from .seed_service import ensure_app_user, reset_planets, seed_planets

__all__ = [
    "PlanetRepository",
    "ensure_app_user",
    "reset_planets",
    "seed_planets",
]
