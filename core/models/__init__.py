# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - planet.py: Planet record schema
#
# These models define the "contract" between the API, the seed script and
# clients.
# =============================================================================

from .planet import Planet

__all__ = [
    "Planet",
]
