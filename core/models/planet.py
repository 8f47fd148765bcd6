# =============================================================================
# core/models/planet.py - Planet Schema
# =============================================================================
# Planet: one document in the planets collection, shared by the API service
# and the seed script.
#
# Planet records are written once by the seed script and only read by the
# service afterwards.
# =============================================================================

from pydantic import BaseModel, Field


class Planet(BaseModel):
    """
    Schema for a planet record.

    Distances and velocities are display strings with their units attached,
    not parsed numbers.

    Example:
        {
            "id": 3,
            "name": "Earth",
            "description": "Earth is the third planet from the Sun ...",
            "image": "images/earth.png",
            "velocity": "29.78 km/s",
            "distance": "149.6 million km"
        }
    """

    # 0 is the Sun, 1-9 follow orbital order
    id: int = Field(..., ge=0, description="Stable numeric identifier")

    name: str = Field(..., description="Short display name")

    description: str = Field(..., description="One-sentence description")

    image: str = Field(..., description="Relative path of the image asset")

    velocity: str = Field(..., description="Orbital velocity, e.g. '47.87 km/s' or 'N/A'")

    distance: str = Field(..., description="Distance from the Sun, e.g. '57.91 million km'")
