# =============================================================================
# app/routers/planets.py - Planet Lookup Endpoint
# =============================================================================
# POST /planet returns one planet record by its numeric id.
# =============================================================================

import logging
from typing import Any

from fastapi import APIRouter, Body, Response

from app.dependencies import PlanetRepositoryDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/planet")
async def get_planet(
    repository: PlanetRepositoryDep,
    payload: Any = Body(default=None, examples=[{"id": 3}]),
):
    """
    Look up a planet by id.

    Any JSON body is accepted. The `id` of an object body is passed to the
    store unchecked; a body that is not an object, or has no `id`, looks up
    a missing id. An id that matches nothing returns 200 with an empty body;
    a failing store query returns 500 (see PlanetStoreError).
    """
    planet_id = payload.get("id") if isinstance(payload, dict) else None
    logger.info(f"Received Planet ID {planet_id}")

    planet = await repository.find_by_id(planet_id)

    if planet is None:
        return Response(status_code=200)

    return planet
