# =============================================================================
# core/services/seed_service.py - Planet Data Seeding
# =============================================================================
# Provisions the planet database for the API service:
# 1. Select the target database
# 2. Create (or update) the application user with readWrite on it
# 3. Drop the planets collection
# 4. Insert the fixed dataset in one insert_many
#
# This is an operator task run before the service starts. Nothing here is
# wrapped in a transaction and errors are not caught: a failure between the
# drop and the insert leaves the collection empty until the next run.
# =============================================================================

import logging

from pymongo import MongoClient
from pymongo.database import Database

from core.seed_data import planet_documents

logger = logging.getLogger(__name__)

PLANETS_COLLECTION = "planets"


def ensure_app_user(database: Database, username: str, password: str) -> None:
    """
    Make sure `username` exists with readWrite on `database`.

    Creates the user on the first run and resets its password and roles on
    later runs, so seeding can be repeated.
    """
    roles = [{"role": "readWrite", "db": database.name}]

    existing = database.command("usersInfo", username)
    if existing.get("users"):
        logger.info(f"Updating user '{username}' on {database.name}")
        database.command("updateUser", username, pwd=password, roles=roles)
    else:
        logger.info(f"Creating user '{username}' on {database.name}")
        database.command("createUser", username, pwd=password, roles=roles)


def reset_planets(database: Database, collection_name: str = PLANETS_COLLECTION) -> int:
    """
    Drop the planets collection and insert the fixed dataset.

    Returns:
        Number of documents inserted
    """
    collection = database[collection_name]

    collection.drop()
    logger.info(f"Dropped collection {database.name}.{collection_name}")

    result = collection.insert_many(planet_documents())
    return len(result.inserted_ids)


def seed_planets(
    client: MongoClient,
    db_name: str,
    username: str,
    password: str,
    collection_name: str = PLANETS_COLLECTION,
) -> int:
    """
    Run the full seed sequence against `db_name`.

    Args:
        client: Connected pymongo client with admin rights
        db_name: Database to provision
        username: Application user to create
        password: Password for the application user
        collection_name: Collection to reload

    Returns:
        Number of planet records inserted
    """
    database = client[db_name]

    ensure_app_user(database, username, password)
    inserted = reset_planets(database, collection_name)

    logger.info(f"Inserted {inserted} planet records")
    logger.info("Planet data initialization complete!")
    return inserted
