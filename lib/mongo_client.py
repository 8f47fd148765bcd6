# =============================================================================
# lib/mongo_client.py - MongoDB Client Construction
# =============================================================================
# Builds MongoDB clients from Settings:
# - create_mongo_client: async motor client used by the API service
# - create_sync_client: blocking pymongo client used by the seed script
# - ping_database: connectivity check logged at startup
#
# The API creates exactly one motor client per process (in the app lifespan)
# and hands it to request handlers through FastAPI dependencies. Connection
# pooling is left to the driver.
#
# Usage:
#   client = create_mongo_client(settings)
#   collection = client[settings.MONGO_DB_NAME][settings.MONGO_COLLECTION]
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from app.config import Settings

logger = logging.getLogger(__name__)


def _client_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments shared by the async and sync clients."""
    options: dict[str, Any] = {
        "serverSelectionTimeoutMS": settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
    }
    # Credentials are optional; the URI may already carry them
    if settings.MONGO_USERNAME:
        options["username"] = settings.MONGO_USERNAME
    if settings.MONGO_PASSWORD:
        options["password"] = settings.MONGO_PASSWORD
    return options


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create the motor client for the API service.

    Motor connects lazily, so this never blocks or fails on an unreachable
    server; the first query does.

    Args:
        settings: Application settings

    Returns:
        AsyncIOMotorClient bound to settings.MONGO_URI
    """
    logger.info(f"Connecting to MongoDB at: {settings.MONGO_URI}")
    return AsyncIOMotorClient(settings.MONGO_URI, **_client_options(settings))


def create_sync_client(settings: Settings) -> MongoClient:
    """Create a blocking pymongo client for one-shot scripts."""
    logger.info(f"Connecting to MongoDB at: {settings.MONGO_URI}")
    return MongoClient(settings.MONGO_URI, **_client_options(settings))


async def ping_database(client: AsyncIOMotorClient) -> bool:
    """
    Check that the server answers a ping.

    Failures are logged, not raised: the service keeps running and lookup
    requests report store errors individually.

    Returns:
        True if the ping succeeded
    """
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        logger.error(f"MongoDB connection error: {e}")
        return False

    logger.info("MongoDB Connection Successful")
    return True
