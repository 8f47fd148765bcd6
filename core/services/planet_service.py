# =============================================================================
# core/services/planet_service.py - Planet Lookup
# =============================================================================
# Reads planet records from the planets collection.
# Separates HTTP concerns from database logic.
# =============================================================================

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from app.exceptions import PlanetStoreError

logger = logging.getLogger(__name__)

# Internal Mongo id is never returned to clients
PLANET_PROJECTION = {"_id": 0}


class PlanetRepository:
    """
    Read-only access to the planets collection.

    Wraps one collection handle that is created once per process and shared
    across requests.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_by_id(self, planet_id: Any) -> dict[str, Any] | None:
        """
        Fetch the first planet whose `id` equals planet_id.

        planet_id is used as-is; a value of the wrong type just matches
        nothing.

        Args:
            planet_id: Identifier taken from the request body

        Returns:
            The planet document without `_id`, or None if nothing matches

        Raises:
            PlanetStoreError: If the query itself fails
        """
        try:
            return await self.collection.find_one(
                {"id": planet_id},
                PLANET_PROJECTION,
            )
        except PyMongoError as e:
            logger.error(f"Error retrieving planet data: {e}")
            raise PlanetStoreError() from e
